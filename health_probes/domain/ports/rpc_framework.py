"""Domain ports for the RPC framework introspection consumed by the RPC probe."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional, Protocol


class RpcStatusLevel(str, Enum):
    """Levels reported by the framework's status extensions."""

    OK = "OK"
    WARN = "WARN"
    ERROR = "ERROR"
    UNKNOWN = "UNKNOWN"


class IEchoService(Protocol):
    """Remote reference supporting an echo round trip."""

    def echo(self, message: Any) -> Any:
        ...


class IReferenceBean(Protocol):
    """Client-side reference to a remote interface."""

    interface: str

    def get_object(self) -> Optional[IEchoService]:
        """Return the live proxy, or None when it is not available."""
        ...


class IRpcFramework(Protocol):
    """Status extensions and remote references exposed by the RPC framework."""

    def check_status(self, name: str) -> RpcStatusLevel:
        """Run the status extension registered under ``name``."""
        ...

    def reference_beans(self) -> Iterable[IReferenceBean]:
        """Enumerate the remote references known to the application."""
        ...
