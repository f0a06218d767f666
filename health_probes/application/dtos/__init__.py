"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .health_dto import ReportDTO, SystemHealthDTO

__all__ = ["ReportDTO", "SystemHealthDTO"]
