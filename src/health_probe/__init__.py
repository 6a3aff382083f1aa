"""
Health Probe - HTTP health checks with retries.

Probe a single endpoint, retry with exponential backoff, report the result.
"""

__version__ = "0.1.0"

from .exceptions import (
    HealthProbeError,
    ConfigurationError,
    InvalidURLError,
    InvalidValueError,
)
from .probe import Outcome, ProbeResult, Prober
from .retry import RetryConfig, RetryController, RetrySession, calculate_backoff, check
from .settings import CheckSettings
from .reporting import Reporter

__all__ = [
    # Version
    "__version__",
    # Probe
    "Outcome",
    "ProbeResult",
    "Prober",
    # Retry
    "RetryConfig",
    "RetryController",
    "RetrySession",
    "calculate_backoff",
    "check",
    # Settings & reporting
    "CheckSettings",
    "Reporter",
    # Exceptions
    "HealthProbeError",
    "ConfigurationError",
    "InvalidURLError",
    "InvalidValueError",
]
