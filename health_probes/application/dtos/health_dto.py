"""DTOs for probe reports and the aggregated health response."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from health_probes.domain.entities.health import ProbeStatus, Report, SystemHealth


class ReportDTO(BaseModel):
    """Serializable representation of one probe report."""

    status: ProbeStatus = Field(description="UP or DOWN")
    reason: Optional[str] = Field(
        default=None, description="Free-text qualifier of the status"
    )
    checked_at: datetime = Field(description="Timestamp of the check")
    details: Dict[str, Any] = Field(
        default_factory=dict, description="Timing, results and errors"
    )

    @classmethod
    def from_domain(cls, report: Report) -> "ReportDTO":
        return cls(
            status=report.status,
            reason=report.reason,
            checked_at=report.checked_at,
            details=dict(report.details),
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "UP",
                "reason": None,
                "checked_at": "2024-09-09T12:00:00Z",
                "details": {"result": "ok", "time_ms": 2, "version": "7.2.4"},
            }
        }
    }


class SystemHealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: ProbeStatus = Field(description="UP iff every probe is UP")
    components: Dict[str, ReportDTO] = Field(
        default_factory=dict, description="Report of each probe, keyed by name"
    )

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            components={
                name: ReportDTO.from_domain(report)
                for name, report in health.components.items()
            },
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "DOWN",
                "components": {
                    "zookeeper": {
                        "status": "DOWN",
                        "reason": None,
                        "checked_at": "2024-09-09T12:00:00Z",
                        "details": {"error": "Client not started"},
                    },
                    "datasource": {
                        "status": "UP",
                        "reason": None,
                        "checked_at": "2024-09-09T12:00:00Z",
                        "details": {"database": "unknown"},
                    },
                },
            }
        }
    }
