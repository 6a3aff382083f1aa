"""Tests for check settings - parsing and validation."""

import pytest

from health_probe.exceptions import InvalidURLError, InvalidValueError
from health_probe.settings import CheckSettings, read_env_inputs


class TestFromInputs:
    """Raw action inputs are parsed with defaults."""

    def test_defaults(self):
        settings = CheckSettings.from_inputs({"url": "https://example.com/health"})

        assert settings.timeout == 30
        assert settings.timeout_ms == 30000
        assert settings.retry_count == 3
        assert settings.expected_status == 200

    def test_parses_string_numbers(self):
        settings = CheckSettings.from_inputs(
            {
                "url": " http://localhost:8080/ready ",
                "timeout": "5",
                "retry-count": "1",
                "expected-status": "204",
            }
        )

        assert settings.url == "http://localhost:8080/ready"
        assert settings.timeout_ms == 5000
        assert settings.retry_count == 1
        assert settings.expected_status == 204

    def test_blank_values_use_defaults(self):
        settings = CheckSettings.from_inputs(
            {"url": "http://example.com", "timeout": "", "retry-count": "  "}
        )

        assert settings.timeout == 30
        assert settings.retry_count == 3

    def test_non_numeric_value_is_rejected(self):
        with pytest.raises(InvalidValueError) as exc_info:
            CheckSettings.from_inputs({"url": "http://example.com", "timeout": "soon"})

        assert exc_info.value.field == "timeout"

    def test_fractional_timeout(self):
        """Sub-second deadlines are allowed."""
        settings = CheckSettings.from_inputs({"url": "http://example.com", "timeout": "0.5"})

        assert settings.timeout == 0.5
        assert settings.timeout_ms == 500

    @pytest.mark.parametrize("raw", ["nan", "inf", "0.0001"])
    def test_unusable_timeouts_are_rejected(self, raw):
        with pytest.raises(InvalidValueError):
            CheckSettings.from_inputs({"url": "http://example.com", "timeout": raw})


class TestValidation:
    """Malformed inputs are rejected before probing."""

    @pytest.mark.parametrize(
        "url",
        ["", "example.com/health", "ftp://example.com", "http://", "http://host:notaport/"],
    )
    def test_invalid_urls(self, url):
        with pytest.raises(InvalidURLError):
            CheckSettings(url=url)

    def test_timeout_must_be_positive(self):
        with pytest.raises(InvalidValueError):
            CheckSettings(url="http://example.com", timeout=0)

    def test_retry_count_must_be_positive(self):
        with pytest.raises(InvalidValueError) as exc_info:
            CheckSettings(url="http://example.com", retry_count=0)

        assert exc_info.value.field == "retry-count"

    @pytest.mark.parametrize("status", [99, 600])
    def test_expected_status_range(self, status):
        with pytest.raises(InvalidValueError):
            CheckSettings(url="http://example.com", expected_status=status)


class TestEnvInputs:
    """INPUT_* variables follow the CI runner convention."""

    def test_reads_hyphenated_names(self):
        env = {
            "INPUT_URL": "http://example.com",
            "INPUT_RETRY-COUNT": "5",
            "INPUT_EXPECTED-STATUS": "301",
        }

        settings = CheckSettings.from_env(env)

        assert settings.retry_count == 5
        assert settings.expected_status == 301

    def test_accepts_underscored_names(self):
        inputs = read_env_inputs({"INPUT_RETRY_COUNT": "2", "INPUT_TIMEOUT": "9"})

        assert inputs == {"retry-count": "2", "timeout": "9"}

    def test_missing_url_is_rejected(self):
        with pytest.raises(InvalidURLError):
            CheckSettings.from_env({})
