"""
Presentation Layer Package

This package exposes the probes over HTTP through FastAPI routers.
"""

from health_probes.presentation import controllers

__all__ = ["controllers"]
