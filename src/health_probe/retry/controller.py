"""
Retry loop around the prober.

Attempts run strictly one after another. A healthy result ends the loop at
once; otherwise the controller waits with exponential backoff and probes
again until the attempt budget is spent.
"""

import asyncio
import contextlib
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from .backoff import calculate_backoff
from .config import RetryConfig
from ..exceptions import InvalidValueError
from ..probe import ProbeResult, Prober

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]


@dataclass
class RetrySession:
    """State of a single check() call. Never shared between calls."""

    attempts_made: int = 0
    last_result: ProbeResult | None = None
    cancelled: bool = False


async def _until_cancelled(
    aw: Awaitable[T], cancel_event: asyncio.Event | None
) -> tuple[bool, T | None]:
    """
    Await *aw* unless *cancel_event* fires first.

    Returns:
        (completed, value). When the event wins, *aw* is cancelled and
        (False, None) is returned.
    """
    task = asyncio.ensure_future(aw)
    if cancel_event is None:
        return True, await task

    waiter = asyncio.ensure_future(cancel_event.wait())
    try:
        await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        task.cancel()
        raise
    finally:
        waiter.cancel()

    if task.done():
        return True, task.result()

    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await task
    return False, None


class RetryController:
    """
    Repeatedly probe a target until it is healthy or attempts run out.

    The returned result's outcome is the only failure signal: exhausting the
    attempts is not an error here.
    """

    def __init__(
        self,
        prober: Prober | None = None,
        retry_config: RetryConfig | None = None,
        sleep: Sleep | None = None,
    ):
        """
        Initialize the controller.

        Args:
            prober: Prober used for each attempt (default: Prober())
            retry_config: Attempt budget and backoff policy
            sleep: Coroutine used for delays between attempts (default: asyncio.sleep)
        """
        self.prober = prober or Prober()
        self.retry_config = retry_config or RetryConfig()
        self._sleep = sleep or asyncio.sleep

    async def check(
        self,
        url: str,
        timeout_ms: int,
        expected_status: int = 200,
        retry_count: int | None = None,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> tuple[ProbeResult, int]:
        """
        Probe *url* with retries.

        Args:
            url: Absolute http or https URL
            timeout_ms: Per-attempt deadline in milliseconds
            expected_status: Status code that counts as healthy
            retry_count: Maximum number of attempts (default: retry_config.max_attempts)
            cancel_event: When set, stops the in-flight probe and the loop

        Returns:
            The last result and the number of completed attempts
        """
        if retry_count is None:
            retry_count = self.retry_config.max_attempts
        if retry_count < 1:
            raise InvalidValueError(
                "retry-count must be at least 1",
                field="retry-count",
                value=retry_count,
            )

        session = RetrySession()
        started = time.perf_counter()

        while session.attempts_made < retry_count:
            if cancel_event is not None and cancel_event.is_set():
                session.cancelled = True
                break

            attempt = session.attempts_made + 1
            logger.info(f"Health check attempt {attempt}/{retry_count}")

            completed, result = await _until_cancelled(
                self.prober.probe(url, timeout_ms, expected_status), cancel_event
            )
            if not completed:
                session.cancelled = True
                break

            session.attempts_made = attempt
            session.last_result = result

            if result.is_healthy:
                logger.info(f"Health check passed on attempt {attempt}")
                break

            logger.warning(f"Health check failed on attempt {attempt}: {result.message}")

            if attempt < retry_count:
                delay = calculate_backoff(attempt, self.retry_config)
                logger.info(f"Waiting {int(delay * 1000)}ms before retry...")
                completed, _ = await _until_cancelled(self._sleep(delay), cancel_event)
                if not completed:
                    session.cancelled = True
                    break

        if session.cancelled:
            logger.warning(f"Health check cancelled after {session.attempts_made} attempt(s)")

        if session.last_result is None:
            elapsed = int((time.perf_counter() - started) * 1000)
            session.last_result = ProbeResult.failure(
                url, "Health check cancelled", elapsed, error="cancelled"
            )

        return session.last_result, session.attempts_made


async def check(
    url: str,
    timeout_ms: int,
    expected_status: int = 200,
    retry_count: int = 3,
    *,
    cancel_event: asyncio.Event | None = None,
) -> tuple[ProbeResult, int]:
    """Probe *url* with retries using a default controller."""
    return await RetryController().check(
        url,
        timeout_ms,
        expected_status,
        retry_count,
        cancel_event=cancel_event,
    )
