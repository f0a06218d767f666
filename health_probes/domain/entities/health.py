"""
Health domain entities.

This module defines the value objects produced by health probes: the
two-valued probe status, the immutable report and the builder used by
probes to accumulate details before finalizing a report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


class ProbeStatus(str, Enum):
    """Availability of a single dependency."""

    UP = "UP"
    DOWN = "DOWN"


@dataclass(frozen=True, slots=True)
class Report:
    """Immutable outcome of one probe invocation."""

    status: ProbeStatus
    details: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    reason: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_up(self) -> bool:
        return self.status is ProbeStatus.UP


@dataclass(slots=True)
class SystemHealth:
    """Reports of every registered probe plus their combined status."""

    status: ProbeStatus
    components: Dict[str, Report] = field(default_factory=dict)


class ReportBuilder:
    """Accumulates status and details, then finalizes them into a Report."""

    def __init__(self) -> None:
        self._status: Optional[ProbeStatus] = None
        self._reason: Optional[str] = None
        self._details: Dict[str, Any] = {}

    def up(self) -> "ReportBuilder":
        return self.status(ProbeStatus.UP)

    def down(self, error: Optional[BaseException] = None) -> "ReportBuilder":
        self.status(ProbeStatus.DOWN)
        if error is not None:
            self._details["error"] = describe_error(error)
        return self

    def status(
        self, status: ProbeStatus, reason: Optional[str] = None
    ) -> "ReportBuilder":
        self._status = status
        self._reason = reason
        return self

    def with_detail(self, key: str, value: Any) -> "ReportBuilder":
        self._details[key] = value
        return self

    def with_details(self, details: Mapping[str, Any]) -> "ReportBuilder":
        self._details.update(details)
        return self

    @property
    def current_status(self) -> Optional[ProbeStatus]:
        return self._status

    def build(self) -> Report:
        if self._status is None:
            raise ValueError("Report status must be set before building")
        return Report(
            status=self._status,
            details=MappingProxyType(dict(self._details)),
            reason=self._reason,
        )


def describe_error(error: BaseException) -> str:
    """Human readable message for an exception, never empty."""
    message = str(error)
    return message or error.__class__.__name__
