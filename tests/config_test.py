#!/usr/bin/env python3
import pytest

from hostfacts.config import DEFAULT_CMD_TIMEOUT, Settings, load_settings


def test_defaults_from_empty_environment():
    s = load_settings({})
    assert s == Settings()
    assert s.verbose is False
    assert s.cmd_timeout == DEFAULT_CMD_TIMEOUT
    assert s.fs_root == ""


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("no", False)])
def test_verbose_flag(raw, expected):
    assert load_settings({"HOSTFACTS_VERBOSE": raw}).verbose is expected


def test_timeout_value_and_disable():
    assert load_settings({"HOSTFACTS_CMD_TIMEOUT": "2.5"}).cmd_timeout == 2.5
    assert load_settings({"HOSTFACTS_CMD_TIMEOUT": "0"}).cmd_timeout is None
    assert load_settings({"HOSTFACTS_CMD_TIMEOUT": "-1"}).cmd_timeout is None


@pytest.mark.parametrize("raw", ["soon", "nan", "inf", "-inf", "1e999", "[/]", "[/x]"])
def test_invalid_timeout_falls_back_with_warning(raw, capsys):
    s = load_settings({"HOSTFACTS_CMD_TIMEOUT": raw})
    assert s.cmd_timeout == DEFAULT_CMD_TIMEOUT
    assert "HOSTFACTS_CMD_TIMEOUT" in capsys.readouterr().err


def test_fs_root():
    assert load_settings({"HOSTFACTS_ROOT": "/mnt/image"}).fs_root == "/mnt/image"


def test_reads_process_environment_by_default(monkeypatch):
    monkeypatch.setenv("HOSTFACTS_CMD_TIMEOUT", "7")
    assert load_settings().cmd_timeout == 7.0
