"""Shared fixtures for health probe tests."""

import httpx
import pytest

from health_probe.probe import Prober


class RecordingSleep:
    """Stand-in for asyncio.sleep that records requested delays."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def make_prober(handler) -> Prober:
    """Create a prober whose requests are answered by *handler*."""
    return Prober(transport=httpx.MockTransport(handler))


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture(autouse=True)
def clean_action_env(monkeypatch):
    """Keep runner variables from leaking into tests."""
    for name in (
        "GITHUB_OUTPUT",
        "GITHUB_STEP_SUMMARY",
        "INPUT_URL",
        "INPUT_TIMEOUT",
        "INPUT_RETRY-COUNT",
        "INPUT_RETRY_COUNT",
        "INPUT_EXPECTED-STATUS",
        "INPUT_EXPECTED_STATUS",
    ):
        monkeypatch.delenv(name, raising=False)
