"""Domain port implemented by every dependency probe."""

from __future__ import annotations

from typing import Protocol

from health_probes.domain.entities.health import Report


class IHealthProbe(Protocol):
    """Produces a health report for one external dependency."""

    name: str

    def check(self) -> Report:
        """Run the probe; failures are reported as DOWN, never raised."""
        ...
