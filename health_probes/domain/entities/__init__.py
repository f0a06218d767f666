"""
Domain Entities Package

This package contains the value objects produced and consumed by probes.
"""

from .errors import DomainError, ProbeNotFoundError
from .health import (
    ProbeStatus,
    Report,
    ReportBuilder,
    SystemHealth,
    describe_error,
)
from .timed_outcome import TimedOutcome

__all__ = [
    "ProbeStatus",
    "Report",
    "ReportBuilder",
    "SystemHealth",
    "TimedOutcome",
    "describe_error",
    "DomainError",
    "ProbeNotFoundError",
]
