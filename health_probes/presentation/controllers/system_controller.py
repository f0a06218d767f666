"""System endpoints exposing the probes."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Response, status

from health_probes.application.dtos.health_dto import ReportDTO, SystemHealthDTO
from health_probes.application.use_cases.health_use_cases import (
    GetHealthStatusUseCase,
    GetProbeReportUseCase,
)
from health_probes.domain.entities.errors import ProbeNotFoundError
from health_probes.domain.entities.health import ProbeStatus
from health_probes.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


def _status_code_for(probe_status: ProbeStatus) -> int:
    if probe_status is ProbeStatus.UP:
        return status.HTTP_200_OK
    return status.HTTP_503_SERVICE_UNAVAILABLE


@router.get(
    "/health",
    response_model=SystemHealthDTO,
    responses={503: {"model": SystemHealthDTO}},
)
@inject
async def health(
    response: Response,
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    """Run every probe; 503 when any dependency is DOWN."""
    health_status = await get_health_status_use_case.execute()
    response.status_code = _status_code_for(health_status.status)
    logger.debug("health.check.completed", status=health_status.status.value)
    return health_status


@router.get(
    "/health/{probe_name}",
    response_model=ReportDTO,
    responses={503: {"model": ReportDTO}, 404: {"description": "Unknown probe"}},
)
@inject
async def probe_health(
    probe_name: str,
    response: Response,
    get_probe_report_use_case: GetProbeReportUseCase = Depends(
        Provide["get_probe_report_use_case"]
    ),
) -> ReportDTO:
    """Run a single probe by name."""
    try:
        report = await get_probe_report_use_case.execute(probe_name)
    except ProbeNotFoundError as exc:
        logger.info("health.probe.not_found", probe=probe_name)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.message
        ) from exc

    response.status_code = _status_code_for(report.status)
    return report
