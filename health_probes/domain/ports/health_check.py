"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Protocol

from health_probes.domain.entities.health import Report, SystemHealth


class IHealthCheckService(Protocol):
    """Interface for running the registered probes."""

    async def evaluate(self) -> SystemHealth:
        """Run every probe and aggregate their reports."""
        ...

    async def evaluate_probe(self, name: str) -> Report:
        """Run the probe registered under ``name``."""
        ...
