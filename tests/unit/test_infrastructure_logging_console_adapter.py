"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- Level methods pass the event name and context through to structlog
- Exceptions are flattened into error_type / error_message
- bind() returns a new adapter and leaves the original untouched
- JSON output masks credentials and honours the minimum level
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import (
    MASK,
    ConsoleAdapter,
    redact_secrets,
)


@pytest.fixture
def structlog_logger():
    with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
        logger = MagicMock()
        mock_structlog.get_logger.return_value = logger
        yield logger


@pytest.mark.unit
class TestConsoleAdapterLogging:
    def test_info_passes_context(self, structlog_logger):
        ConsoleAdapter().info("registration_created", registration_id="r-1")

        structlog_logger.info.assert_called_once_with(
            "registration_created", registration_id="r-1"
        )

    def test_error_flattens_exception(self, structlog_logger):
        ConsoleAdapter().error(
            "confirmation_email_failed",
            error=ConnectionRefusedError("smtp down"),
            recipient="asha@college.edu",
        )

        structlog_logger.error.assert_called_once_with(
            "confirmation_email_failed",
            recipient="asha@college.edu",
            error_type="ConnectionRefusedError",
            error_message="smtp down",
        )

    def test_critical_without_exception(self, structlog_logger):
        ConsoleAdapter().critical("database_unreachable", attempts=3)

        structlog_logger.critical.assert_called_once_with(
            "database_unreachable", attempts=3
        )

    def test_bind_returns_new_adapter(self, structlog_logger):
        adapter = ConsoleAdapter()

        bound = adapter.bind(trace_id="t-1")

        assert bound is not adapter
        structlog_logger.bind.assert_called_once_with(trace_id="t-1")
        bound.warning("slow_request")
        structlog_logger.bind.return_value.warning.assert_called_once_with(
            "slow_request"
        )


@pytest.mark.unit
class TestRedaction:
    def test_processor_masks_only_secret_keys(self):
        event = {"event": "login_failed", "email": "a@college.edu", "password": "x"}

        assert redact_secrets(None, "info", event) == {
            "event": "login_failed",
            "email": "a@college.edu",
            "password": MASK,
        }

    def test_json_output_is_masked(self, capsys):
        adapter = ConsoleAdapter(use_json=True)

        adapter.info("otp_issued", email="a@college.edu", otp_code="042917")

        entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert entry["event"] == "otp_issued"
        assert entry["otp_code"] == MASK
        assert entry["level"] == "info"
        assert "042917" not in json.dumps(entry)

    def test_level_filtering(self, capsys):
        adapter = ConsoleAdapter(use_json=True, level="warning")

        adapter.info("hidden")
        adapter.warning("shown")

        lines = capsys.readouterr().out.strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["shown"]
