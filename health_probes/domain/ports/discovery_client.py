"""Domain ports for the service-discovery client consumed by the discovery probe."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence


class IDiscoveryInstance(Protocol):
    instance_id: str
    app_name: str
    health_check_url: str


class IDiscoveryApplication(Protocol):
    name: str
    instances: Sequence[IDiscoveryInstance]


class IDiscoveryClient(Protocol):
    """Local registry client plus its snapshot of registered applications."""

    should_fetch_registry: bool
    registry_fetch_interval_seconds: int

    def instance_remote_status(self) -> str:
        """Status of this instance as seen by the registry server."""
        ...

    def last_registry_fetch_age_ms(self) -> Optional[int]:
        """
        Milliseconds since the last successful registry fetch.

        Negative when no fetch has ever succeeded, None when the client
        does not track it.
        """
        ...

    def applications(self) -> Optional[Sequence[IDiscoveryApplication]]:
        """Current snapshot of registered applications."""
        ...
