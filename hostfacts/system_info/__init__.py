"""
Per-OS fact providers.

PROVIDERS maps a lower-cased platform.system() name to its HostInfo class.
A None entry is an OS family hostfacts knows about but does not implement
yet; it is rejected exactly like an unknown name.
"""

from .base import UNKNOWN, HostInfo
from .linux_info import LinuxInfo

PROVIDERS = {
    "linux": LinuxInfo,
    "darwin": None,
    "windows": None,
}


class UnsupportedOSError(RuntimeError):
    def __init__(self, os_name: str):
        super().__init__(f"Unsupported OS: {os_name}")
        self.os_name = os_name


def get_provider(os_name: str, sys_utils) -> HostInfo:
    """Instantiate the provider for os_name or raise UnsupportedOSError."""
    provider_cls = PROVIDERS.get(os_name)
    if provider_cls is None:
        raise UnsupportedOSError(os_name)
    return provider_cls(sys_utils)


__all__ = [
    "HostInfo",
    "LinuxInfo",
    "PROVIDERS",
    "UNKNOWN",
    "UnsupportedOSError",
    "get_provider",
]
