"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ProbeNotFoundError(DomainError):
    """Raised when no probe is registered under the requested name."""

    def __init__(self, probe_name: str, details: Optional[Dict[str, Any]] = None):
        message = f"Probe '{probe_name}' is not registered"
        super().__init__(message, details)
