#!/usr/bin/env python3
"""
hostfacts command-line entry point.

Detects the running OS, picks its fact provider and prints one
"<Label>: <value>" line per fact to stdout. There are no functional flags;
behaviour is tuned through HOSTFACTS_* environment variables (see config.py).
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import __version__
from .config import load_settings
from .report import collect_facts
from .standard_ui import log_info, print_line, set_verbose
from .system_info import UnsupportedOSError, get_provider
from .system_utils import SystemUtils


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hostfacts",
        description="Print OS, kernel, uptime, shell, display, CPU, GPU and memory facts for this host.",
        epilog="Environment: HOSTFACTS_VERBOSE, HOSTFACTS_CMD_TIMEOUT, HOSTFACTS_ROOT.",
    )
    p.add_argument(
        "-V", "--version",
        action="version",
        version=f"hostfacts {__version__}",
    )
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """
    Console entrypoint used by the `hostfacts` script and `python -m hostfacts`.

    Returns 1 without calling any accessor when the OS has no provider.
    """
    build_parser().parse_args(argv)

    settings = load_settings()
    set_verbose(settings.verbose)
    sys_utils = SystemUtils(settings)

    try:
        provider = get_provider(sys_utils.os_name, sys_utils)
    except UnsupportedOSError as e:
        print_line(str(e))
        return 1

    log_info(f"Gathering facts with {type(provider).__name__}...")
    for fact in collect_facts(provider):
        print_line(fact.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
