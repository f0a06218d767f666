"""
Infrastructure Layer Package

This package contains the probe implementations and the factories that
build the vendor clients they call.
"""

from health_probes.infrastructure import probes

__all__ = ["probes"]
