"""Timed execution of a single call against an external collaborator."""

from time import perf_counter
from typing import Any, Callable

from health_probes.domain.entities.timed_outcome import TimedOutcome


def _elapsed_ms(start: float) -> int:
    return max(0, int(round((perf_counter() - start) * 1000)))


def timed_call(operation: Callable[[], Any]) -> TimedOutcome:
    """
    Execute ``operation`` once and measure how long it took.

    The call is never retried and never interrupted; any timeout policy
    belongs to the underlying client. Exceptions raised by the operation
    are captured in the outcome instead of propagating.

    Args:
        operation: Zero-argument callable performing the external call.

    Returns:
        TimedOutcome: Elapsed milliseconds plus the value or the error.
    """
    start = perf_counter()
    try:
        value = operation()
    except Exception as exc:
        return TimedOutcome(elapsed_ms=_elapsed_ms(start), succeeded=False, error=exc)
    return TimedOutcome(elapsed_ms=_elapsed_ms(start), succeeded=True, value=value)
