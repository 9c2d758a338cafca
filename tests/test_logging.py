"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers

import pytest

from budgetgrid.config import BaseConfig
from budgetgrid.logging_config import (
    LOG_BACKUPS,
    MAX_LOG_BYTES,
    JSONFormatter,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _reset_package_logger(tmp_path, monkeypatch):
    monkeypatch.setenv("BUDGETGRID_DATA_DIR", str(tmp_path))
    yield
    logger = logging.getLogger("budgetgrid")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_json_formatter():
    """Test that JSONFormatter correctly formats log records."""
    formatter = JSONFormatter()

    record = logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="Test message",
        args=(),
        exc_info=None,
    )
    record.module = "test_module"
    record.funcName = "test_function"

    log_data = json.loads(formatter.format(record))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception_and_extra():
    """Exceptions and extra fields are carried into the JSON payload."""
    formatter = JSONFormatter()

    try:
        raise ValueError("Test error")
    except ValueError:
        import sys

        exc_info = sys.exc_info()

    record = logging.LogRecord(
        name="test.logger",
        level=logging.ERROR,
        pathname="test.py",
        lineno=42,
        msg="Error occurred",
        args=(),
        exc_info=exc_info,
    )
    record.category_id = "housing"

    log_data = json.loads(formatter.format(record))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None
    assert log_data["extra"] == {"category_id": "housing"}


def test_setup_logging(tmp_path):
    """Test that logging setup creates log files with rotation."""
    config = BaseConfig()
    config.DATA_DIR = str(tmp_path)
    config.DEV_MODE = True

    logger = setup_logging(config)

    assert logger.name == "budgetgrid"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    log_file = tmp_path / "logs" / "budgetgrid.log"
    assert log_file.exists()

    get_logger("session").info("Edit committed", extra={"category_id": "food"})
    for handler in logger.handlers:
        handler.flush()

    lines = [line for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    entries = [json.loads(line) for line in lines]
    assert entries[0]["message"] == "Logging initialized"
    assert entries[-1]["logger"] == "budgetgrid.session"
    assert entries[-1]["extra"]["category_id"] == "food"


def test_setup_logging_is_idempotent(tmp_path):
    config = BaseConfig()
    config.DATA_DIR = str(tmp_path)

    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 2


def test_get_logger():
    """Test that get_logger returns properly namespaced loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")

    assert logger1.name == "budgetgrid.module1"
    assert logger2.name == "budgetgrid.module2"
    assert logger1 != logger2


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(tmp_path, dev_mode):
    """Test that console logging level adjusts based on dev mode."""
    config = BaseConfig()
    config.DATA_DIR = str(tmp_path)
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console_handler = next(
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    )

    expected_level = logging.INFO if dev_mode else logging.WARNING
    assert console_handler.level == expected_level


def test_json_timestamp_comes_from_the_record():
    record = logging.LogRecord("budgetgrid.x", logging.INFO, "x.py", 1, "hello", (), None)
    record.created = 0

    log_data = json.loads(JSONFormatter().format(record))

    assert log_data["timestamp"] == "1970-01-01T00:00:00+00:00"


def test_file_handler_rotates(tmp_path):
    config = BaseConfig()
    config.DATA_DIR = str(tmp_path)

    logger = setup_logging(config)

    file_handler = next(
        handler for handler in logger.handlers if isinstance(handler, logging.handlers.RotatingFileHandler)
    )
    assert file_handler.maxBytes == MAX_LOG_BYTES
    assert file_handler.backupCount == LOG_BACKUPS
    assert isinstance(file_handler.formatter, JSONFormatter)
