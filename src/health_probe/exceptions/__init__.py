"""
Health Probe - Exception Hierarchy.

Configuration errors reported before any probing begins.
"""

from .base import (
    HealthProbeError,
    ConfigurationError,
    InvalidURLError,
    InvalidValueError,
)

__all__ = [
    "HealthProbeError",
    "ConfigurationError",
    "InvalidURLError",
    "InvalidValueError",
]
