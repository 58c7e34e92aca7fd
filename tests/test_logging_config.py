"""
Tests for structured JSON logging configuration.

This module tests:
- JSONFormatter (JSON log output)
- setup_logging() (logging configuration)
- get_logger() (logger factory)
"""

import io
import json
import logging

import pytest

from school.core.logging_config import JSONFormatter, get_logger, setup_logging


def make_logger(name: str) -> tuple[logging.Logger, io.StringIO]:
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.handlers = []
    logger.propagate = False

    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    return logger, stream


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_json_formatter_basic_message(self):
        """
        Test JSONFormatter outputs valid JSON.

        Arrange: Create logger with JSONFormatter
        Act: Log a message
        Assert: Output is valid JSON with required fields
        """
        # Arrange
        logger, stream = make_logger("test_logger")

        # Act
        logger.info("Test message")

        # Assert
        log_data = json.loads(stream.getvalue().strip())
        assert log_data["level"] == "INFO"
        assert log_data["message"] == "Test message"
        assert "timestamp" in log_data
        assert log_data["logger"] == "test_logger"

    def test_json_formatter_with_extra_fields(self):
        """Test extra fields are included in the JSON output."""
        logger, stream = make_logger("test_logger_extra")

        logger.info("Student enrolled", extra={"student_id": 1, "subject_id": 2})

        log_data = json.loads(stream.getvalue().strip())
        assert log_data["student_id"] == 1
        assert log_data["subject_id"] == 2
        assert "args" not in log_data
        assert "pathname" not in log_data

    def test_json_formatter_with_exception(self):
        """Test exception details are serialized."""
        logger, stream = make_logger("test_logger_exc")

        try:
            raise ValueError("bad value")
        except ValueError:
            logger.exception("Failed")

        log_data = json.loads(stream.getvalue().strip())
        assert log_data["level"] == "ERROR"
        assert "ValueError: bad value" in log_data["exception"]


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_setup_logging_replaces_handlers(self, restore_root_logger):
        stream = io.StringIO()

        setup_logging(level="DEBUG", json_format=True, stream=stream)

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_setup_logging_plain_format(self, restore_root_logger):
        stream = io.StringIO()

        setup_logging(level="INFO", json_format=False, stream=stream)
        get_logger("plain").info("hello")

        line = stream.getvalue().strip()
        assert line.endswith("plain - INFO - hello")

    def test_setup_logging_quiets_sqlalchemy(self, restore_root_logger):
        setup_logging(level="DEBUG", stream=io.StringIO())

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_get_logger_returns_named_logger():
    assert get_logger("school.test").name == "school.test"
