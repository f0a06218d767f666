"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and logging helpers used by every layer. It must not
depend on Infrastructure or Frameworks.
"""

from .consts import (
    TIME_DETAIL_KEY,
    UNKNOWN_DETAIL_VALUE,
    EnumEnvironment,
    EnumLogLevel,
    EnumProbe,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumProbe",
    "TIME_DETAIL_KEY",
    "UNKNOWN_DETAIL_VALUE",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
