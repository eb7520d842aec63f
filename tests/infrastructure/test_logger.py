"""Tests for the logging formatters and logger setup."""

import io
import json
import logging
from uuid import uuid4

import pytest
from infrastructure.config import APP_LOGGER_NAME, get_logger, setup_logger
from infrastructure.config.logger import JSONFormatter, TextFormatter


def _record(message: str = "Application denied", **context) -> logging.LogRecord:
    record = logging.LogRecord(
        name=f"{APP_LOGGER_NAME}.ApplicationAdmissionService",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in context.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    """Test JSON and text output."""

    def test_json_includes_context_fields(self):
        """Test that identifiers passed through extra become JSON keys."""
        offer_id = uuid4()
        entry = json.loads(
            JSONFormatter().format(_record(job_offer_id=offer_id, reason="monthly limit reached"))
        )

        assert entry["level"] == "WARNING"
        assert entry["message"] == "Application denied"
        assert entry["job_offer_id"] == str(offer_id)
        assert entry["reason"] == "monthly limit reached"
        assert "application_id" not in entry

    def test_text_without_color_appends_context(self):
        """Test the plain text line with its context suffix."""
        profession_id = uuid4()
        line = TextFormatter(use_color=False).format(_record("Sweep failed", profession_id=profession_id))

        assert "\033[" not in line
        assert line.endswith(f"Sweep failed | profession_id={profession_id}")


class TestSetupLogger:
    """Test handler installation and logger naming."""

    def test_writes_json_to_stream(self):
        """Test that a configured logger writes JSON lines to the given stream."""
        stream = io.StringIO()
        setup_logger(name="talent_registry_test", level="debug", log_format="json", stream=stream)

        logging.getLogger("talent_registry_test.child").info("ready")

        assert json.loads(stream.getvalue())["message"] == "ready"

    def test_repeated_setup_keeps_one_handler(self):
        """Test that calling setup twice does not duplicate output."""
        setup_logger(name="talent_registry_test", stream=io.StringIO())
        logger = setup_logger(name="talent_registry_test", stream=io.StringIO())
        assert len(logger.handlers) == 1

    def test_unknown_level_raises_error(self):
        """Test that an unknown level name raises ValueError."""
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logger(name="talent_registry_test", level="loud", stream=io.StringIO())

    def test_get_logger_nests_names(self):
        """Test that loggers are placed under the application namespace."""
        assert get_logger("Tracker").name == f"{APP_LOGGER_NAME}.Tracker"
        assert get_logger(f"{APP_LOGGER_NAME}.db").name == f"{APP_LOGGER_NAME}.db"
        assert get_logger().name == APP_LOGGER_NAME
