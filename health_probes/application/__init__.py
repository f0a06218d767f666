"""
Application Layer Package

This package contains the use cases that run probes and the DTOs that
shape their reports for the presentation layer.
"""

# Re-export submodules
from health_probes.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
