"""
Retry configuration.
"""

from dataclasses import dataclass

from ..exceptions import InvalidValueError


@dataclass
class RetryConfig:
    """
    Configuration for retry behavior.

    Attributes:
        max_attempts: Total number of probe attempts, including the first (default: 3)
        base_delay: Delay before the second attempt, in seconds (default: 1.0)
        max_delay: Maximum delay cap in seconds (default: 10.0)
    """

    max_attempts: int = 3
    base_delay: float = 1.0
    max_delay: float = 10.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise InvalidValueError(
                "max_attempts must be at least 1",
                field="max_attempts",
                value=self.max_attempts,
            )
        if self.base_delay < 0 or self.max_delay < 0:
            raise InvalidValueError(
                "Delays must not be negative",
                field="base_delay" if self.base_delay < 0 else "max_delay",
            )

    @classmethod
    def single_attempt(cls) -> "RetryConfig":
        """Preset for one direct probe with no retry."""
        return cls(max_attempts=1)

    @classmethod
    def patient(cls) -> "RetryConfig":
        """Preset for slow-starting targets (more attempts, same delay cap)."""
        return cls(max_attempts=8)
