"""Tests for reporting of the final result."""

import io
import json

from health_probe.probe import Outcome, ProbeResult
from health_probe.reporting import Reporter, build_outputs, format_summary, format_text


URL = "http://service.test/health"


def healthy_result() -> ProbeResult:
    return ProbeResult(
        url=URL,
        outcome=Outcome.HEALTHY,
        response_time_ms=42,
        message="Health check passed (200)",
        status_code=200,
        body_size=2,
    )


def timeout_result() -> ProbeResult:
    return ProbeResult.failure(
        URL, "Health check timed out after 50ms", 51, timed_out=True
    )


class TestOutputs:
    def test_build_outputs(self):
        outputs = build_outputs(healthy_result())

        assert outputs["status"] == "healthy"
        assert outputs["response-time"] == "42"
        assert json.loads(outputs["details"])["status_code"] == 200

    def test_summary_for_healthy_result(self):
        summary = format_summary(healthy_result())

        assert "Health Check Results" in summary
        assert f"| {URL} | ✅ Healthy | 42ms | 200 |" in summary
        assert "Error Details" not in summary

    def test_summary_for_unhealthy_result(self):
        summary = format_summary(timeout_result())

        assert "❌ Unhealthy" in summary
        assert "| N/A |" in summary
        assert "Health check timed out after 50ms" in summary

    def test_summary_escapes_pipes_in_url(self):
        result = ProbeResult.failure("http://service.test/a|b", "failed", 3)

        summary = format_summary(result)

        assert "| http://service.test/a\\|b | ❌ Unhealthy | 3ms | N/A |" in summary

    def test_text_summary(self):
        text = format_text(timeout_result(), attempts=3)

        assert f"Target:        {URL}" in text
        assert "Status code:   N/A" in text
        assert "Attempts:      3" in text


class TestReporter:
    def test_writes_output_and_summary_files(self, tmp_path):
        output_file = tmp_path / "output"
        summary_file = tmp_path / "summary"
        stream = io.StringIO()
        reporter = Reporter(output_path=output_file, summary_path=summary_file, stream=stream)

        reporter.report(healthy_result(), attempts=1)

        output = output_file.read_text()
        assert "status=healthy\n" in output
        assert "response-time=42\n" in output
        assert "details<<ghadelimiter_" in output
        assert "Health Check Results" in summary_file.read_text()
        assert "Status:        healthy" in stream.getvalue()

    def test_appends_to_existing_output_file(self, tmp_path):
        output_file = tmp_path / "output"
        output_file.write_text("previous=1\n")

        Reporter(output_path=output_file, stream=io.StringIO()).report(
            healthy_result(), attempts=1
        )

        assert output_file.read_text().startswith("previous=1\n")

    def test_json_mode_writes_details(self):
        stream = io.StringIO()

        Reporter(stream=stream, as_json=True).report(timeout_result(), attempts=2)

        data = json.loads(stream.getvalue())
        assert data["status"] == "unhealthy"
        assert data["timed_out"] is True

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GITHUB_OUTPUT", str(tmp_path / "out"))

        reporter = Reporter.from_env()

        assert reporter.output_path == tmp_path / "out"
        assert reporter.summary_path is None
