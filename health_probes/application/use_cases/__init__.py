"""
Use Cases Package - Application Layer

This package contains use cases that run the registered probes.
"""

from .health_use_cases import GetHealthStatusUseCase, GetProbeReportUseCase

__all__ = ["GetHealthStatusUseCase", "GetProbeReportUseCase"]
