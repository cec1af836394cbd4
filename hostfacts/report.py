from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .system_info import HostInfo

# Report order and labels; the second item is the HostInfo accessor.
FACT_ACCESSORS = (
    ("OS", "os_name"),
    ("HostName", "hostname"),
    ("Kernel", "kernel"),
    ("Uptime", "uptime"),
    ("Shell", "shell"),
    ("Resolution", "resolution"),
    ("DE", "desktop_environment"),
    ("CPU", "cpu"),
    ("GPU", "gpu"),
    ("Memory", "memory"),
)


@dataclass(frozen=True)
class HostFact:
    label: str
    value: str

    def render(self) -> str:
        return f"{self.label}: {self.value}"


def collect_facts(provider: HostInfo) -> List[HostFact]:
    """Call every accessor once, in report order."""
    return [HostFact(label, getattr(provider, name)()) for label, name in FACT_ACCESSORS]
