"""
standard_ui.py

Console output for hostfacts, built on Rich.
  - Diagnostics (log_info, log_warning) go to stderr so they never
    mix with the report.
  - print_line writes one report line to stdout verbatim: no markup, no
    highlighting, no wrapping.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# ---------- Console + Theme ----------

_THEME = Theme(
    {
        "ui.info": "cyan",
        "ui.warn": "yellow bold",
    }
)

console = Console(theme=_THEME, highlight=False)
err_console = Console(theme=_THEME, highlight=False, stderr=True)

# ---------- Global State ----------

VERBOSE = False


def set_verbose(verbose: bool) -> None:
    """Set global verbosity. If False, log_info is suppressed."""
    global VERBOSE
    VERBOSE = bool(verbose)


# ---------- Logging ----------


def log_info(message: str) -> None:
    """Info is suppressed unless VERBOSE is True."""
    if VERBOSE:
        err_console.print(f"[ui.info]ℹ  {escape(message)}[/]")


def log_warning(message: str) -> None:
    err_console.print(f"[ui.warn]⚠️  {escape(message)}[/]")


# ---------- Report output ----------


def print_line(text: str) -> None:
    # lspci descriptions carry "[AMD/ATI]"-style brackets; print them as-is.
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
