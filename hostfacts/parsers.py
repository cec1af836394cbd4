#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pure text parsers for the pseudo-files and command outputs hostfacts reads.

Nothing here touches the OS; every function takes the raw text and either
returns the extracted value or raises ValueError.
"""
from __future__ import annotations

import math
import re
from typing import List, Optional

VGA_CLASS = "VGA compatible controller"

_XRANDR_CURRENT_RE = re.compile(r"\bcurrent\s+(\d+)\s*x\s*(\d+)")
_MODE_RE = re.compile(r"^(\d+)x(\d+)")


# ----------------------------
# /proc/uptime
# ----------------------------

def parse_uptime_seconds(text: str) -> Optional[float]:
    """
    Seconds since boot from /proc/uptime ("12345.67 89.01").

    Only the first field is used. Returns None when the file has no fields.
    """
    fields = text.split()
    if not fields:
        return None
    try:
        seconds = float(fields[0])
    except ValueError:
        raise ValueError(f"invalid uptime value {fields[0]!r}") from None
    # format_duration works in centiseconds; that count must stay finite too.
    if not math.isfinite(seconds * 100) or seconds < 0:
        raise ValueError(f"invalid uptime value {fields[0]!r}")
    return seconds


def format_duration(seconds: float) -> str:
    """
    Compact duration string: 3h25m45.67s, 1m0s, 59s, 0s.

    Hours are the largest unit. Fractions are kept to centiseconds, which is
    the resolution /proc/uptime reports.
    """
    centis = int(round(seconds * 100))
    hours, rem = divmod(centis, 360_000)
    minutes, rem = divmod(rem, 6_000)
    secs, frac = divmod(rem, 100)

    sec_text = str(secs)
    if frac:
        sec_text = f"{secs}.{frac:02d}".rstrip("0")

    if hours:
        return f"{hours}h{minutes}m{sec_text}s"
    if minutes:
        return f"{minutes}m{sec_text}s"
    return f"{sec_text}s"


# ----------------------------
# /proc/cpuinfo
# ----------------------------

def _cpuinfo_blocks(text: str) -> List[dict]:
    blocks: List[dict] = []
    current: dict = {}
    for raw in text.splitlines():
        if not raw.strip():
            if current:
                blocks.append(current)
                current = {}
            continue
        if ":" not in raw:
            continue
        key, value = raw.split(":", 1)
        current[key.strip().lower()] = value.strip()
    if current:
        blocks.append(current)
    return blocks


def parse_cpu_model(text: str) -> Optional[str]:
    """
    Model name of the first logical processor listed in /proc/cpuinfo.

    Returns None when no processor block is present or the first one has no
    model name (common on ARM kernels).
    """
    for block in _cpuinfo_blocks(text):
        if "processor" not in block:
            continue
        return block.get("model name") or None
    return None


# ----------------------------
# /proc/meminfo
# ----------------------------

def parse_mem_total_kb(text: str) -> int:
    """MemTotal from /proc/meminfo, in kB."""
    for raw in text.splitlines():
        key, sep, rest = raw.partition(":")
        if not sep or key.strip() != "MemTotal":
            continue
        parts = rest.split()
        if not parts:
            break
        try:
            return int(parts[0])
        except ValueError:
            raise ValueError(f"invalid MemTotal value {parts[0]!r}") from None
    raise ValueError("MemTotal not found in meminfo")


def format_gb(kb: int) -> str:
    return f"{kb / (1024 * 1024):.2f} GB"


# ----------------------------
# lspci
# ----------------------------

def find_vga_controller(lspci_output: str) -> Optional[str]:
    """
    Description of the first "VGA compatible controller" line in lspci output.

    "01:00.0 VGA compatible controller: NVIDIA Corporation Device 1234"
    -> "NVIDIA Corporation Device 1234"
    """
    for line in lspci_output.splitlines():
        if VGA_CLASS not in line:
            continue
        _, sep, description = line.partition(": ")
        if sep and description.strip():
            return description.strip()
    return None


# ----------------------------
# Display resolution
# ----------------------------

def parse_xrandr_current(xrandr_output: str) -> Optional[str]:
    """
    "Screen 0: minimum 8 x 8, current 1920 x 1080, maximum 32767 x 32767"
    -> "1920x1080"
    """
    for line in xrandr_output.splitlines():
        if not line.startswith("Screen "):
            continue
        m = _XRANDR_CURRENT_RE.search(line)
        if m:
            return f"{m.group(1)}x{m.group(2)}"
    return None


def parse_drm_mode(modes_text: str) -> Optional[str]:
    """First (preferred) mode of a DRM connector's 'modes' file, e.g. 2560x1440."""
    for line in modes_text.splitlines():
        m = _MODE_RE.match(line.strip())
        if m:
            return f"{m.group(1)}x{m.group(2)}"
    return None
