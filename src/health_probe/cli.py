"""
Command-line entry point.

Exit codes: 0 healthy, 1 unhealthy after all retries, 2 configuration error.
"""

import argparse
import asyncio
import contextlib
import logging
import signal
import sys
from typing import Sequence

from . import __version__
from .exceptions import ConfigurationError
from .probe import ProbeResult
from .reporting import Reporter
from .retry import RetryController
from .settings import CheckSettings, read_env_inputs

logger = logging.getLogger(__name__)

EXIT_HEALTHY = 0
EXIT_UNHEALTHY = 1
EXIT_CONFIG_ERROR = 2

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once, writing to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="health-probe",
        description="Probe an HTTP endpoint with retries and report its health.",
    )
    parser.add_argument(
        "url",
        nargs="?",
        help="Absolute http(s) URL to probe (default: $INPUT_URL)",
    )
    parser.add_argument("--timeout", help="Per-attempt timeout in seconds (default: 30)")
    parser.add_argument("--retry-count", help="Maximum number of attempts (default: 3)")
    parser.add_argument("--expected-status", help="Status code counted as healthy (default: 200)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr output (default: INFO)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_settings(args: argparse.Namespace) -> CheckSettings:
    """Merge INPUT_* environment values with CLI flags; flags win."""
    inputs: dict[str, str] = read_env_inputs()
    overrides = {
        "url": args.url,
        "timeout": args.timeout,
        "retry-count": args.retry_count,
        "expected-status": args.expected_status,
    }
    inputs.update({name: value for name, value in overrides.items() if value is not None})
    return CheckSettings.from_inputs(inputs)


async def run_check(
    settings: CheckSettings,
    controller: RetryController | None = None,
) -> tuple[ProbeResult, int]:
    """Run the retry sequence, stopping early on SIGINT or SIGTERM."""
    controller = controller or RetryController()
    cancel_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    installed = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        with contextlib.suppress(NotImplementedError, RuntimeError):
            loop.add_signal_handler(sig, cancel_event.set)
            installed.append(sig)
    try:
        return await controller.check(
            settings.url,
            settings.timeout_ms,
            settings.expected_status,
            settings.retry_count,
            cancel_event=cancel_event,
        )
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        settings = resolve_settings(args)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"health-probe: configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logger.info(f"Starting health check for {settings.url}")
    logger.info(
        f"Configuration: timeout={settings.timeout_ms}ms, "
        f"retries={settings.retry_count}, expected-status={settings.expected_status}"
    )

    result, attempts = asyncio.run(run_check(settings))
    Reporter.from_env(as_json=args.json).report(result, attempts)

    return EXIT_HEALTHY if result.is_healthy else EXIT_UNHEALTHY


if __name__ == "__main__":
    sys.exit(main())
