"""
Single-shot HTTP prober.

Issues one GET against a target and turns every terminal event (response,
transport error, timeout) into a ProbeResult. Retry policy belongs to the
caller.
"""

import asyncio
import logging
import time

import httpx

from .result import Outcome, ProbeResult
from .. import __version__

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"health-probe/{__version__}"


def _elapsed_ms(start: float) -> int:
    return max(0, int((time.perf_counter() - start) * 1000))


class Prober:
    """
    Probe a single URL once.

    Features:
    - One deadline covers connect, headers and body
    - Timeout reported separately from other transport failures
    - Never raises for a failed exchange
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the prober.

        Args:
            user_agent: Value of the User-Agent header sent with every probe
            transport: Optional httpx transport (mainly for tests)
        """
        self.user_agent = user_agent
        self.transport = transport

    async def _fetch(self, url: str, timeout_ms: int) -> tuple[int, dict[str, str], int]:
        async with httpx.AsyncClient(
            timeout=timeout_ms / 1000,
            headers={"User-Agent": self.user_agent},
            transport=self.transport,
        ) as client:
            async with client.stream("GET", url) as response:
                body = await response.aread()
                return response.status_code, dict(response.headers), len(body)

    async def probe(
        self,
        url: str,
        timeout_ms: int,
        expected_status: int = 200,
    ) -> ProbeResult:
        """
        Probe the target once.

        Args:
            url: Absolute http or https URL
            timeout_ms: Deadline for the whole exchange, in milliseconds
            expected_status: Status code that counts as healthy

        Returns:
            The result of the exchange; failures are unhealthy results
        """
        start = time.perf_counter()
        try:
            status_code, headers, body_size = await asyncio.wait_for(
                self._fetch(url, timeout_ms), timeout=timeout_ms / 1000
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            elapsed = _elapsed_ms(start)
            logger.debug(f"Probe of {url} timed out after {elapsed}ms")
            return ProbeResult.failure(
                url,
                f"Health check timed out after {timeout_ms}ms",
                elapsed,
                timed_out=True,
            )
        except Exception as e:
            elapsed = _elapsed_ms(start)
            error = str(e) or type(e).__name__
            logger.debug(f"Probe of {url} failed after {elapsed}ms: {error}")
            return ProbeResult.failure(
                url,
                f"Health check failed: {error}",
                elapsed,
                error=error,
            )

        elapsed = _elapsed_ms(start)
        logger.debug(f"Probe of {url} returned {status_code} in {elapsed}ms")

        if status_code == expected_status:
            outcome = Outcome.HEALTHY
            message = f"Health check passed ({status_code})"
        else:
            outcome = Outcome.UNHEALTHY
            message = f"Health check failed. Expected {expected_status}, got {status_code}"

        return ProbeResult(
            url=url,
            outcome=outcome,
            response_time_ms=elapsed,
            message=message,
            status_code=status_code,
            headers=headers,
            body_size=body_size,
        )
