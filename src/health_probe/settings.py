"""
Check inputs and their validation.

Inputs come from CLI flags or the INPUT_* variables a CI runner exports.
"""

import math
import os
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlsplit

from .exceptions import InvalidURLError, InvalidValueError

DEFAULT_TIMEOUT_S = 30
DEFAULT_RETRY_COUNT = 3
DEFAULT_EXPECTED_STATUS = 200

INPUT_NAMES = ("url", "timeout", "retry-count", "expected-status")


def validate_url(url: str) -> str:
    url = (url or "").strip()
    if not url:
        raise InvalidURLError("url is required", url=url)
    parts = urlsplit(url)
    if parts.scheme not in {"http", "https"}:
        raise InvalidURLError(f"Unsupported scheme in {url!r}; expected http or https", url=url)
    if not parts.hostname:
        raise InvalidURLError(f"Missing host in {url!r}", url=url)
    try:
        parts.port
    except ValueError as e:
        raise InvalidURLError(f"Invalid port in {url!r}: {e}", url=url) from e
    return url


def _parse_int(name: str, raw: Any, default: int) -> int:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    if isinstance(raw, bool):
        raise InvalidValueError(f"{name} must be an integer", field=name, value=raw)
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError as e:
        raise InvalidValueError(
            f"{name} must be an integer, got {raw!r}", field=name, value=raw
        ) from e


def _parse_float(name: str, raw: Any, default: float) -> float:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    if isinstance(raw, bool):
        raise InvalidValueError(f"{name} must be a number", field=name, value=raw)
    try:
        value = float(str(raw).strip())
    except ValueError as e:
        raise InvalidValueError(
            f"{name} must be a number, got {raw!r}", field=name, value=raw
        ) from e
    if not math.isfinite(value):
        raise InvalidValueError(f"{name} must be finite, got {raw!r}", field=name, value=raw)
    return value


@dataclass(frozen=True)
class CheckSettings:
    url: str
    timeout: float = DEFAULT_TIMEOUT_S
    retry_count: int = DEFAULT_RETRY_COUNT
    expected_status: int = DEFAULT_EXPECTED_STATUS

    def __post_init__(self) -> None:
        validate_url(self.url)
        if self.timeout <= 0 or self.timeout_ms < 1:
            raise InvalidValueError("timeout must be positive", field="timeout", value=self.timeout)
        if self.retry_count < 1:
            raise InvalidValueError(
                "retry-count must be at least 1", field="retry-count", value=self.retry_count
            )
        if not 100 <= self.expected_status <= 599:
            raise InvalidValueError(
                "expected-status must be between 100 and 599",
                field="expected-status",
                value=self.expected_status,
            )

    @property
    def timeout_ms(self) -> int:
        return int(self.timeout * 1000)

    @classmethod
    def from_inputs(cls, inputs: Mapping[str, Any]) -> "CheckSettings":
        """Build settings from raw action inputs keyed by input name."""
        return cls(
            url=str(inputs.get("url") or "").strip(),
            timeout=_parse_float("timeout", inputs.get("timeout"), DEFAULT_TIMEOUT_S),
            retry_count=_parse_int(
                "retry-count", inputs.get("retry-count"), DEFAULT_RETRY_COUNT
            ),
            expected_status=_parse_int(
                "expected-status", inputs.get("expected-status"), DEFAULT_EXPECTED_STATUS
            ),
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CheckSettings":
        return cls.from_inputs(read_env_inputs(environ))


def read_env_inputs(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Collect INPUT_* variables, accepting both '-' and '_' in names."""
    env = os.environ if environ is None else environ
    inputs: dict[str, str] = {}
    for name in INPUT_NAMES:
        for key in (f"INPUT_{name.upper()}", f"INPUT_{name.upper().replace('-', '_')}"):
            value = env.get(key, "").strip()
            if value:
                inputs[name] = value
                break
    return inputs
