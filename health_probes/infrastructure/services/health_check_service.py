"""Infrastructure implementation running the registered probes."""

from __future__ import annotations

import asyncio
from typing import Dict

from health_probes.domain.entities.health import Report, ReportBuilder, SystemHealth
from health_probes.domain.ports.health_check import IHealthCheckService
from health_probes.domain.ports.health_probe import IHealthProbe
from health_probes.domain.services import aggregate_status
from health_probes.infrastructure.probes.registry import ProbeRegistry
from health_probes.shared import get_logger

logger = get_logger(__name__)


class HealthCheckService(IHealthCheckService):
    """Run blocking probes on worker threads and aggregate their reports."""

    def __init__(self, probe_registry: ProbeRegistry) -> None:
        self._probe_registry = probe_registry

    async def evaluate(self) -> SystemHealth:
        """Run every probe concurrently; the system is UP iff every probe is."""

        checks = {
            probe.name: asyncio.create_task(self._run(probe))
            for probe in self._probe_registry
        }

        components: Dict[str, Report] = {}
        for name, task in checks.items():
            components[name] = await task

        overall_status = aggregate_status(
            {name: report.status for name, report in components.items()}
        )
        logger.info(
            "health.evaluated",
            status=overall_status.value,
            down=[name for name, report in components.items() if not report.is_up],
        )
        return SystemHealth(status=overall_status, components=components)

    async def evaluate_probe(self, name: str) -> Report:
        probe = self._probe_registry.get(name)
        return await self._run(probe)

    async def _run(self, probe: IHealthProbe) -> Report:
        try:
            return await asyncio.to_thread(probe.check)
        except Exception as exc:  # pragma: no cover - probes already catch
            logger.error("health.probe.crashed", probe=probe.name, error=str(exc))
            return ReportBuilder().down(exc).build()
