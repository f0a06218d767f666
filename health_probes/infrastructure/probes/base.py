"""Base class shared by every dependency probe."""

from __future__ import annotations

from abc import ABC, abstractmethod

from health_probes.domain.entities.health import Report, ReportBuilder
from health_probes.domain.entities.timed_outcome import TimedOutcome
from health_probes.shared import TIME_DETAIL_KEY, UNKNOWN_DETAIL_VALUE, get_logger

logger = get_logger(__name__)


class HealthProbe(ABC):
    """
    Template for probes: subclasses fill a builder, the base guarantees a report.

    ``check`` never raises. Any exception escaping ``_do_check`` marks the
    report DOWN with the exception message under the ``error`` detail.
    """

    name: str = "probe"

    def check(self) -> Report:
        builder = ReportBuilder()
        try:
            if self._is_configured():
                self._do_check(builder)
            else:
                builder.up().with_detail(self._unknown_detail_key, UNKNOWN_DETAIL_VALUE)
        except Exception as exc:
            logger.warning("probe.check.failure", probe=self.name, error=str(exc))
            builder.down(exc)

        if builder.current_status is None:
            # _do_check returned without deciding.
            logger.error("probe.check.status_missing", probe=self.name)
            builder.down().with_detail("error", "Probe did not report a status")

        report = builder.build()
        logger.debug("probe.check.completed", probe=self.name, status=report.status.value)
        return report

    @property
    def _unknown_detail_key(self) -> str:
        return self.name

    def _is_configured(self) -> bool:
        return True

    @abstractmethod
    def _do_check(self, builder: ReportBuilder) -> None:
        """Perform the calls and record status and details on ``builder``."""

    @staticmethod
    def _record_time(builder: ReportBuilder, outcome: TimedOutcome) -> None:
        builder.with_detail(TIME_DETAIL_KEY, outcome.elapsed_ms)
