from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .standard_ui import log_warning

DEFAULT_CMD_TIMEOUT = 5.0

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class Settings:
    verbose: bool = False
    cmd_timeout: Optional[float] = DEFAULT_CMD_TIMEOUT   # None -> wait forever
    fs_root: str = ""                                    # prefix for /proc and /sys reads


def _parse_timeout(raw: str) -> Optional[float]:
    try:
        value = float(raw)
    except ValueError:
        log_warning(f"Ignoring HOSTFACTS_CMD_TIMEOUT={raw!r}; using {DEFAULT_CMD_TIMEOUT}s.")
        return DEFAULT_CMD_TIMEOUT
    if not math.isfinite(value):
        log_warning(f"Ignoring HOSTFACTS_CMD_TIMEOUT={raw!r}; using {DEFAULT_CMD_TIMEOUT}s.")
        return DEFAULT_CMD_TIMEOUT
    return value if value > 0 else None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from HOSTFACTS_* environment variables.

    There is no config file; the environment is the only source.
    """
    env = os.environ if environ is None else environ
    s = Settings()

    s.verbose = env.get("HOSTFACTS_VERBOSE", "").strip().lower() in _TRUTHY

    raw_timeout = env.get("HOSTFACTS_CMD_TIMEOUT", "").strip()
    if raw_timeout:
        s.cmd_timeout = _parse_timeout(raw_timeout)

    s.fs_root = env.get("HOSTFACTS_ROOT", "").strip()
    return s
