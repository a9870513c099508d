"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import sys

from voicejournal.config import BaseConfig
from voicejournal.logging_config import JSONFormatter, get_logger, setup_logging


def _record(**kwargs) -> logging.LogRecord:
    record = logging.LogRecord(
        name="voicejournal.test",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="Journal entry saved",
        args=(),
        exc_info=kwargs.pop("exc_info", None),
    )
    record.module = "test_module"
    record.funcName = "test_function"
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


def test_json_formatter():
    """JSONFormatter emits the standard fields."""
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "voicejournal.test"
    assert log_data["message"] == "Journal entry saved"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_keeps_extra_fields():
    log_data = json.loads(JSONFormatter().format(_record(current_streak=3, mood="😊")))
    assert log_data["extra"] == {"current_streak": 3, "mood": "😊"}


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(JSONFormatter().format(_record(exc_info=exc_info)))

    assert log_data["exception"]["type"] == "ValueError"
    assert log_data["exception"]["message"] == "Test error"
    assert "Traceback" in log_data["exception"]["traceback"]


def test_setup_logging_writes_json_file():
    config = BaseConfig()
    logger = setup_logging(config)
    try:
        get_logger("services.journal").info("hello", extra={"entry_id": "abc"})
        for handler in logger.handlers:
            handler.flush()

        log_file = config.DATA_DIR / "logs" / "voicejournal.log"
        lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert lines[0]["message"] == "Logging initialized"
        assert lines[-1]["logger"] == "voicejournal.services.journal"
        assert lines[-1]["extra"] == {"entry_id": "abc"}
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


def test_setup_logging_is_idempotent():
    config = BaseConfig()
    logger = setup_logging(config)
    count = len(logger.handlers)
    try:
        assert len(setup_logging(config).handlers) == count
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


def test_get_logger_namespacing():
    assert get_logger("cli").name == "voicejournal.cli"
    assert get_logger("voicejournal.services.journal").name == "voicejournal.services.journal"
