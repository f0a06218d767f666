from __future__ import annotations

import pytest
from fastapi import HTTPException, Response

from health_probes.application.use_cases.health_use_cases import (
    GetHealthStatusUseCase,
    GetProbeReportUseCase,
)
from health_probes.domain.entities.errors import ProbeNotFoundError
from health_probes.domain.entities.health import (
    ProbeStatus,
    Report,
    ReportBuilder,
    SystemHealth,
)
from health_probes.presentation.controllers.system_controller import (
    health,
    probe_health,
)


class _HealthService:
    def __init__(self, status: ProbeStatus):
        self._report = ReportBuilder().status(status).build()

    async def evaluate(self) -> SystemHealth:
        return SystemHealth(
            status=self._report.status, components={"mongo": self._report}
        )

    async def evaluate_probe(self, name: str) -> Report:
        if name != "mongo":
            raise ProbeNotFoundError(name)
        return self._report


@pytest.mark.asyncio
async def test_health_endpoint_returns_status():
    response = Response()
    dto = await health(
        response=response,
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ProbeStatus.UP)
        ),
    )
    assert dto.status is ProbeStatus.UP
    assert "mongo" in dto.components
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_health_endpoint_is_unavailable_when_down():
    response = Response()
    dto = await health(
        response=response,
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ProbeStatus.DOWN)
        ),
    )
    assert dto.status is ProbeStatus.DOWN
    assert response.status_code == 503


@pytest.mark.asyncio
async def test_probe_endpoint_returns_report():
    response = Response()
    dto = await probe_health(
        probe_name="mongo",
        response=response,
        get_probe_report_use_case=GetProbeReportUseCase(
            _HealthService(ProbeStatus.DOWN)
        ),
    )
    assert dto.status is ProbeStatus.DOWN
    assert response.status_code == 503


@pytest.mark.asyncio
async def test_probe_endpoint_unknown_probe_is_not_found():
    with pytest.raises(HTTPException) as exc_info:
        await probe_health(
            probe_name="kafka",
            response=Response(),
            get_probe_report_use_case=GetProbeReportUseCase(
                _HealthService(ProbeStatus.UP)
            ),
        )
    assert exc_info.value.status_code == 404
    assert "kafka" in exc_info.value.detail
