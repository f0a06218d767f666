"""Domain services shared by every probe."""

from .aggregation import aggregate_status
from .timing import timed_call

__all__ = ["aggregate_status", "timed_call"]
