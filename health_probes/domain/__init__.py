"""
Domain Layer Package

This package contains the health reporting contract shared by every probe.
It defines entities, collaborator ports and services without dependencies
on external frameworks or infrastructure concerns.
"""

# Re-export submodules
from health_probes.domain import entities, ports, services

__all__ = ["entities", "services", "ports"]
