"""
Probe result types.

A ProbeResult is produced for every terminal path of a probe (response,
transport error, timeout) and is never mutated afterwards.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Outcome(str, Enum):
    """Binary health classification."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProbeResult:
    """
    Result of a single probe against a target.

    Attributes:
        url: The target probed
        outcome: Healthy or unhealthy
        status_code: HTTP status received, None when no response arrived
        response_time_ms: Milliseconds from request start to the terminal event
        message: Human-readable explanation of the outcome
        error: Underlying error text, set only when the exchange failed
        timed_out: True when the deadline expired before a response
        headers: Response headers, empty when no response arrived
        body_size: Number of body bytes drained, None when no response arrived
        timestamp: Instant of completion (UTC)
    """

    url: str
    outcome: Outcome
    response_time_ms: int
    message: str
    status_code: int | None = None
    error: str | None = None
    timed_out: bool = False
    headers: Mapping[str, str] = field(default_factory=dict, compare=False)
    body_size: int | None = None
    timestamp: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        # Read-only view over a private copy of the headers.
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def is_healthy(self) -> bool:
        return self.outcome is Outcome.HEALTHY

    @classmethod
    def failure(
        cls,
        url: str,
        message: str,
        response_time_ms: int,
        *,
        error: str | None = None,
        timed_out: bool = False,
    ) -> "ProbeResult":
        """Create an unhealthy result for an exchange that got no response."""
        return cls(
            url=url,
            outcome=Outcome.UNHEALTHY,
            response_time_ms=max(0, response_time_ms),
            message=message,
            error=error,
            timed_out=timed_out,
        )

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary, omitting absent values."""
        data = {
            "url": self.url,
            "status": self.outcome.value,
            "status_code": self.status_code,
            "response_time_ms": self.response_time_ms,
            "message": self.message,
            "error": self.error,
            "timed_out": self.timed_out,
            "headers": dict(self.headers),
            "body_size": self.body_size,
            "timestamp": self.timestamp.isoformat(),
        }
        return {key: value for key, value in data.items() if value is not None}

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
