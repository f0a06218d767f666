"""Use cases for the health endpoints."""

from health_probes.application.dtos.health_dto import ReportDTO, SystemHealthDTO
from health_probes.domain.ports.health_check import IHealthCheckService


class GetHealthStatusUseCase:
    """Use case responsible for returning the aggregated health status."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> SystemHealthDTO:
        system_health = await self._health_check_service.evaluate()
        return SystemHealthDTO.from_domain(system_health)


class GetProbeReportUseCase:
    """Use case responsible for running a single named probe."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self, probe_name: str) -> ReportDTO:
        report = await self._health_check_service.evaluate_probe(probe_name)
        return ReportDTO.from_domain(report)
