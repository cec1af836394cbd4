from __future__ import annotations

import glob
import os
import socket
import subprocess

from ..parsers import (
    find_vga_controller,
    format_duration,
    format_gb,
    parse_cpu_model,
    parse_drm_mode,
    parse_mem_total_kb,
    parse_uptime_seconds,
    parse_xrandr_current,
)
from ..standard_ui import log_info
from ..system_utils import SystemUtils
from .base import UNKNOWN, HostInfo

UPTIME_PATH = "/proc/uptime"
CPUINFO_PATH = "/proc/cpuinfo"
MEMINFO_PATH = "/proc/meminfo"
DRM_DIR = "/sys/class/drm"

# Failures an accessor turns into an in-band value instead of propagating.
_LOOKUP_ERRORS = (OSError, ValueError, subprocess.SubprocessError)


def _env_or_unknown(name: str) -> str:
    return os.environ.get(name) or UNKNOWN


class LinuxInfo(HostInfo):
    """procfs/sysfs and coreutils backed facts for Linux hosts."""

    def __init__(self, sys_utils: SystemUtils):
        self.sys_utils = sys_utils

    def os_name(self) -> str:
        return self.sys_utils.os_name

    def hostname(self) -> str:
        try:
            return socket.gethostname()
        except OSError as e:
            log_info(f"Hostname lookup failed: {e}")
            return str(e)

    def kernel(self) -> str:
        try:
            return self.sys_utils.run_command(["uname", "-r"]).strip()
        except _LOOKUP_ERRORS as e:
            log_info(f"Kernel lookup failed: {e}")
            return str(e)

    def uptime(self) -> str:
        try:
            seconds = parse_uptime_seconds(self.sys_utils.read_text(UPTIME_PATH))
        except _LOOKUP_ERRORS as e:
            log_info(f"Uptime lookup failed: {e}")
            return str(e)
        if seconds is None:
            return UNKNOWN
        return format_duration(seconds)

    def shell(self) -> str:
        return _env_or_unknown("SHELL")

    def resolution(self) -> str:
        if os.environ.get("DISPLAY"):
            try:
                found = parse_xrandr_current(self.sys_utils.run_command(["xrandr", "--current"]))
            except _LOOKUP_ERRORS as e:
                log_info(f"xrandr query failed: {e}")
                found = None
            if found:
                return found
        return self._drm_resolution() or UNKNOWN

    def _drm_resolution(self):
        """
        Preferred mode of the first connected DRM connector (works without X).

        sysfs lists a connector's modes with the preferred one first; the mode
        currently driven is not exposed there.
        """
        pattern = os.path.join(self.sys_utils.rooted(DRM_DIR), "card*-*")
        for found in sorted(glob.glob(pattern)):
            connector = os.path.join(DRM_DIR, os.path.basename(found))
            try:
                status = self.sys_utils.read_text(os.path.join(connector, "status"))
                if status.strip() != "connected":
                    continue
                mode = parse_drm_mode(self.sys_utils.read_text(os.path.join(connector, "modes")))
            except _LOOKUP_ERRORS as e:
                log_info(f"Skipping {connector}: {e}")
                continue
            if mode:
                return mode
        return None

    def desktop_environment(self) -> str:
        return _env_or_unknown("XDG_CURRENT_DESKTOP")

    def cpu(self) -> str:
        try:
            model = parse_cpu_model(self.sys_utils.read_text(CPUINFO_PATH))
        except _LOOKUP_ERRORS as e:
            log_info(f"CPU lookup failed: {e}")
            return str(e)
        return model or UNKNOWN

    def gpu(self) -> str:
        # Unlike the other command-backed lookups, a failing lspci is reported
        # as "unknown" rather than as error text.
        try:
            output = self.sys_utils.run_command(["lspci"])
        except _LOOKUP_ERRORS as e:
            log_info(f"GPU lookup failed: {e}")
            return UNKNOWN
        return find_vga_controller(output) or UNKNOWN

    def memory(self) -> str:
        try:
            kb = parse_mem_total_kb(self.sys_utils.read_text(MEMINFO_PATH))
        except _LOOKUP_ERRORS as e:
            log_info(f"Memory lookup failed: {e}")
            return str(e)
        return format_gb(kb)
