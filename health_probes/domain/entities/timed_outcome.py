"""Outcome of a single timed call against an external collaborator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class TimedOutcome:
    """Elapsed time and success/failure of one external operation."""

    elapsed_ms: int
    succeeded: bool
    value: Any = None
    error: Optional[BaseException] = None

    def __post_init__(self) -> None:
        if self.elapsed_ms < 0:
            raise ValueError("elapsed_ms must be non-negative")
        if self.succeeded == (self.error is not None):
            raise ValueError("error must be present iff the call failed")
