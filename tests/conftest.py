#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Ensure the project root (containing the 'hostfacts' package) is on sys.path
so tests can import without requiring an installed/editable package.
"""
from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

# tests/ -> project_root/
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def fake_root(tmp_path: Path, monkeypatch) -> Path:
    """Empty pseudo-filesystem root; HOSTFACTS_ROOT points at it."""
    root = tmp_path / "root"
    (root / "proc").mkdir(parents=True)
    monkeypatch.setenv("HOSTFACTS_ROOT", str(root))
    return root


@pytest.fixture
def fake_commands(monkeypatch):
    """
    Route subprocess.run to canned outputs keyed by the program name.

    A value that is an exception instance is raised instead of returned.
    Returns the dict so tests can fill it in, and the list of calls made.
    """
    outputs: dict = {}
    calls: list = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        out = outputs.get(args[0])
        if out is None:
            raise FileNotFoundError(2, "No such file or directory", args[0])
        if isinstance(out, BaseException):
            raise out
        return subprocess.CompletedProcess(args=args, returncode=0, stdout=out, stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    return outputs, calls
