"""
hostfacts: print descriptive facts about the local host.

Provides:
  - Per-OS fact providers (system_info) with a Linux implementation.
  - A report driver (cli) printing ten labelled facts in a fixed order.
"""

__version__ = "0.1.0"

from .report import FACT_ACCESSORS, HostFact, collect_facts
from .system_info import HostInfo, LinuxInfo, UnsupportedOSError, get_provider

__all__ = [
    "__version__",
    "FACT_ACCESSORS",
    "HostFact",
    "HostInfo",
    "LinuxInfo",
    "UnsupportedOSError",
    "collect_facts",
    "get_provider",
]
