"""
Backoff calculation.
"""

from .config import RetryConfig


def calculate_backoff(attempt: int, config: RetryConfig | None = None) -> float:
    """
    Calculate the delay to wait after a failed attempt.

    The delay before attempt N+1 is ``base_delay * 2 ** (N - 1)``, capped at
    ``max_delay``. No jitter is applied.

    Args:
        attempt: One-based number of attempts already made
        config: Retry configuration (default: RetryConfig())

    Returns:
        Delay in seconds
    """
    if attempt < 1:
        raise ValueError(f"attempt must be 1 or greater, got {attempt}")
    if config is None:
        config = RetryConfig()

    # Bounded exponent keeps the float multiplication from overflowing.
    delay = config.base_delay * (2 ** min(attempt - 1, 63))
    return min(delay, config.max_delay)
