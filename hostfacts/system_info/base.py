from __future__ import annotations

from abc import ABC, abstractmethod

UNKNOWN = "unknown"


class HostInfo(ABC):
    """
    The fact accessors one OS family has to provide.

    Every accessor returns a string and never raises: a lookup that yields
    nothing by design returns UNKNOWN, one that fails unexpectedly returns the
    error text in place of the value.
    """

    @abstractmethod
    def os_name(self) -> str: ...

    @abstractmethod
    def hostname(self) -> str: ...

    @abstractmethod
    def kernel(self) -> str: ...

    @abstractmethod
    def uptime(self) -> str: ...

    @abstractmethod
    def shell(self) -> str: ...

    @abstractmethod
    def resolution(self) -> str: ...

    @abstractmethod
    def desktop_environment(self) -> str: ...

    @abstractmethod
    def cpu(self) -> str: ...

    @abstractmethod
    def gpu(self) -> str: ...

    @abstractmethod
    def memory(self) -> str: ...
