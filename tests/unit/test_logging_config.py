"""
Unit tests for structured logging configuration.
"""

import json
import logging
from pathlib import Path
from unittest.mock import Mock

import pytest

from vcutils.logging_config import (
    clear_correlation_id,
    format_duration,
    get_correlation_id,
    get_logger,
    log_http_request,
    log_http_timing,
    set_correlation_id,
    setup_logging,
)


class TestLoggingConfiguration:
    """Test structured logging configuration functionality."""

    def test_setup_logging_default(self):
        """Test setup_logging with default parameters."""
        setup_logging()

        logger = get_logger("test")
        assert hasattr(logger, 'info') and hasattr(logger, 'warning') and hasattr(logger, 'error')

    def test_setup_logging_with_level(self):
        """Test setup_logging with custom log level."""
        setup_logging(level="DEBUG")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG

    def test_setup_logging_json_to_file(self, temp_dir: Path):
        """Test setup_logging writes one JSON document per event."""
        log_file = temp_dir / "logs" / "vcutils.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        logger = get_logger("json_file_test")
        logger.info("test_message", key="value")

        lines = [line for line in log_file.read_text().splitlines() if line.strip()]
        event = json.loads(lines[-1])
        assert event["event"] == "test_message"
        assert event["key"] == "value"
        assert event["level"] == "info"
        assert event["logger"] == "vcutils.json_file_test"

    def test_get_logger_prefix(self):
        """Module loggers are namespaced under vcutils."""
        assert get_logger("vcutils.http_client") is not None
        assert get_logger("other") is not None


class TestCorrelationId:
    """Test correlation ID management."""

    def test_set_and_get(self):
        correlation_id = set_correlation_id("req-123")
        assert correlation_id == "req-123"
        assert get_correlation_id() == "req-123"
        clear_correlation_id()
        assert get_correlation_id() is None

    def test_generated_id(self):
        correlation_id = set_correlation_id()
        assert len(correlation_id) == 36
        clear_correlation_id()

    def test_included_in_log_output(self, temp_dir: Path):
        log_file = temp_dir / "vcutils.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)
        set_correlation_id("corr-42")
        try:
            get_logger("correlation_test").info("with_correlation")
        finally:
            clear_correlation_id()

        event = json.loads(log_file.read_text().splitlines()[-1])
        assert event["correlation_id"] == "corr-42"


class TestFormatDuration:
    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, "0 microseconds"),
            (-1, "0 microseconds"),
            (0.0004, "400 microseconds"),
            (0.012, "12 milliseconds"),
            (0.012501, "12 milliseconds, 501 microseconds"),
            (1, "1 second"),
            (1.25, "1 second, 250 milliseconds"),
            (125, "2 minutes, 5 seconds"),
            (3661.5, "1 hour, 1 minute, 1 second"),
        ],
    )
    def test_format(self, seconds, expected):
        assert format_duration(seconds) == expected


class TestRequestLogHelpers:
    def test_log_http_request(self):
        logger = Mock()
        log_http_request(
            logger,
            "info",
            client="tests.Client",
            method="GET",
            url="https://api.test/",
            headers=[("Accept", "application/json")],
            body=None,
            options={},
            outcome="Success(status=200, body={})",
            attempt=1,
        )
        logger.info.assert_called_once()
        args, kwargs = logger.info.call_args
        assert args == ("http_request",)
        assert kwargs["event_type"] == "http_request"
        assert kwargs["client"] == "tests.Client"
        assert kwargs["headers"] == [("Accept", "application/json")]
        assert kwargs["attempt"] == 1

    def test_log_http_timing(self):
        logger = Mock()
        log_http_timing(
            logger, "warning", client="c", method="POST", url="https://api.test/", elapsed_seconds=1.25
        )
        kwargs = logger.warning.call_args[1]
        assert kwargs["elapsed_ms"] == 1250.0
        assert kwargs["elapsed"] == "1 second, 250 milliseconds"

    def test_disabled_level_logs_nothing(self):
        logger = Mock()
        log_http_request(logger, "none", "c", "GET", "u", [], None, {}, "x")
        log_http_timing(logger, "none", "c", "GET", "u", 0.1)
        assert logger.method_calls == []
