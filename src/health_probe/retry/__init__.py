"""
Health Probe - Retry Logic.

Bounded retries with exponential backoff around the prober.
"""

from .config import RetryConfig
from .backoff import calculate_backoff
from .controller import RetryController, RetrySession, check

__all__ = [
    "RetryConfig",
    "calculate_backoff",
    "RetryController",
    "RetrySession",
    "check",
]
