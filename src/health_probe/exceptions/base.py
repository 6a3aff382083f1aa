"""
Base exception classes for health probe configuration.

Probe failures are never raised: they are reported as unhealthy results.
Only malformed inputs surface as exceptions, before any probing begins.
"""


class HealthProbeError(Exception):
    """Base exception for all health probe errors."""

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"[{self.field}] {self.message}"
        return self.message


class ConfigurationError(HealthProbeError):
    """Raised when check inputs are missing or malformed."""

    def __init__(self, message: str = "Invalid configuration", **kwargs):
        super().__init__(message, **kwargs)


class InvalidURLError(ConfigurationError):
    """Raised when the target is not an absolute http(s) URL."""

    def __init__(self, message: str = "Invalid URL", *, url: str | None = None, **kwargs):
        kwargs.setdefault("field", "url")
        super().__init__(message, **kwargs)
        self.url = url


class InvalidValueError(ConfigurationError):
    """Raised when a numeric input cannot be parsed or is out of range."""

    def __init__(self, message: str = "Invalid value", *, value: object = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
