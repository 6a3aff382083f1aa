"""
Health Probe - Prober.

One HTTP GET per call, classified into a structured result.
"""

from .result import Outcome, ProbeResult
from .prober import DEFAULT_USER_AGENT, Prober

__all__ = [
    "Outcome",
    "ProbeResult",
    "DEFAULT_USER_AGENT",
    "Prober",
]
