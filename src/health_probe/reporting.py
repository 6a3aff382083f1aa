"""
Reporting of the final probe result.

The reporter is invoked once per run with the last result. It writes the
machine-readable outputs, the Markdown step summary and an operator-facing
text summary. Nothing else in the package performs output I/O.
"""

import logging
import os
import sys
import uuid
from pathlib import Path
from typing import TextIO

from .probe import ProbeResult

logger = logging.getLogger(__name__)


def build_outputs(result: ProbeResult) -> dict[str, str]:
    """Build the step outputs for a result."""
    return {
        "status": result.outcome.value,
        "response-time": str(result.response_time_ms),
        "details": result.to_json(),
    }


def _cell(value: str) -> str:
    return value.replace("|", "\\|")


def format_summary(result: ProbeResult) -> str:
    """Render the Markdown step summary."""
    status = "✅ Healthy" if result.is_healthy else "❌ Unhealthy"
    status_code = str(result.status_code) if result.status_code is not None else "N/A"
    lines = [
        "## 🏥 Health Check Results",
        "",
        "| URL | Status | Response Time | Status Code |",
        "| --- | --- | --- | --- |",
        f"| {_cell(result.url)} | {status} | {result.response_time_ms}ms | {status_code} |",
    ]
    if not result.is_healthy:
        lines += ["", "**Error Details:**", "```", result.message, "```"]
    return "\n".join(lines) + "\n"


def format_text(result: ProbeResult, attempts: int) -> str:
    """Render a plain-text summary for an operator."""
    status_code = result.status_code if result.status_code is not None else "N/A"
    lines = [
        f"Target:        {result.url}",
        f"Status:        {result.outcome.value}",
        f"Response time: {result.response_time_ms}ms",
        f"Status code:   {status_code}",
        f"Attempts:      {attempts}",
        f"Message:       {result.message}",
    ]
    if result.error:
        lines.append(f"Error:         {result.error}")
    return "\n".join(lines)


def _format_output(name: str, value: str) -> str:
    if "\n" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


class Reporter:
    """
    Write the final result to its destinations.

    Each destination is optional: the output and summary files are only
    written when a path is configured.
    """

    def __init__(
        self,
        output_path: str | Path | None = None,
        summary_path: str | Path | None = None,
        stream: TextIO | None = None,
        as_json: bool = False,
    ):
        """
        Initialize the reporter.

        Args:
            output_path: File receiving name=value step outputs
            summary_path: File receiving the Markdown summary
            stream: Stream receiving the operator summary (default: stdout)
            as_json: Write the serialized result instead of the text summary
        """
        self.output_path = Path(output_path) if output_path else None
        self.summary_path = Path(summary_path) if summary_path else None
        self.stream = stream
        self.as_json = as_json

    @classmethod
    def from_env(cls, as_json: bool = False) -> "Reporter":
        """Create a reporter targeting GITHUB_OUTPUT and GITHUB_STEP_SUMMARY."""
        return cls(
            output_path=os.environ.get("GITHUB_OUTPUT") or None,
            summary_path=os.environ.get("GITHUB_STEP_SUMMARY") or None,
            as_json=as_json,
        )

    def write_outputs(self, result: ProbeResult) -> None:
        if self.output_path is None:
            return
        with self.output_path.open("a", encoding="utf-8") as f:
            for name, value in build_outputs(result).items():
                f.write(_format_output(name, value))
        logger.debug(f"Wrote outputs to {self.output_path}")

    def write_summary(self, result: ProbeResult) -> None:
        if self.summary_path is None:
            return
        with self.summary_path.open("a", encoding="utf-8") as f:
            f.write(format_summary(result))
        logger.debug(f"Wrote summary to {self.summary_path}")

    def report(self, result: ProbeResult, attempts: int) -> None:
        """Write outputs, summary and the operator summary for *result*."""
        self.write_outputs(result)
        self.write_summary(result)

        stream = self.stream or sys.stdout
        if self.as_json:
            stream.write(result.to_json() + "\n")
        else:
            stream.write(format_text(result, attempts) + "\n")
        stream.flush()

        if result.is_healthy:
            logger.info(f"Health check completed successfully after {attempts} attempt(s)")
        else:
            logger.error(f"Health check failed after {attempts} attempt(s): {result.message}")
