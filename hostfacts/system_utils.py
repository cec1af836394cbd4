# hostfacts/system_utils.py

import os
import platform
import subprocess
from typing import List, Optional

from .config import Settings
from .standard_ui import log_info


class SystemUtils:
    """Ambient OS access shared by the providers: platform name, commands, pseudo-files."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.os_name = platform.system().lower()
        log_info(f"Initialized SystemUtils for OS: {self.os_name}")

    def rooted(self, path: str) -> str:
        """Prefix an absolute pseudo-file path with HOSTFACTS_ROOT, if one is set."""
        root = self.settings.fs_root
        return os.path.join(root, path.lstrip("/")) if root else path

    def read_text(self, path: str) -> str:
        """
        Read a pseudo-file. Raises OSError (or UnicodeDecodeError) untouched so
        each accessor can apply its own failure policy.
        """
        full = self.rooted(path)
        log_info(f"Reading {full}")
        with open(full, "r", encoding="utf-8") as f:
            return f.read()

    def run_command(self, args: List[str]) -> str:
        """
        Run a command without a shell and return its stdout.

        Raises FileNotFoundError when the binary is missing,
        subprocess.CalledProcessError on a non-zero exit and
        subprocess.TimeoutExpired when HOSTFACTS_CMD_TIMEOUT elapses.
        """
        log_info(f"Running command: {' '.join(args)}")
        result = subprocess.run(
            args,
            text=True,
            capture_output=True,
            check=True,
            timeout=self.settings.cmd_timeout,
        )
        return result.stdout
