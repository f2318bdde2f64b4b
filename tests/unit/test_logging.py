"""
Unit tests for the logging module.

Covers:
- Logger creation and retrieval (get_logger, ensure_logger)
- Logger configuration from settings (setup_logger, LOG_LEVEL, DEBUG, LOG_JSON_FORMAT)
- JSON formatter output (JsonFormatter)
"""
import json
import logging
import sys

import pytest

from fastcatch.logging import JsonFormatter, ensure_logger, get_logger, setup_logger


@pytest.fixture
def dummy_settings():
    class DummySettings:
        LOG_LEVEL = "WARNING"
        LOG_JSON_FORMAT = False
        DEBUG = False

    return DummySettings()


def test_get_logger_returns_logger(dummy_settings):
    logger = get_logger("test.module", dummy_settings)
    assert isinstance(logger, logging.Logger)
    assert logger.name == "test.module"
    assert logger.level == logging.WARNING


def test_get_logger_without_settings_defaults_to_info():
    assert get_logger("test.default").level == logging.INFO


def test_get_logger_debug_overrides_level(dummy_settings):
    dummy_settings.DEBUG = True
    assert get_logger("test.debug", dummy_settings).level == logging.DEBUG


def test_get_logger_json_format_from_settings(dummy_settings):
    dummy_settings.LOG_JSON_FORMAT = True
    logger = get_logger("test.json", dummy_settings)
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_ensure_logger_returns_existing_logger(dummy_settings):
    logger = get_logger("test.ensure", dummy_settings)
    assert ensure_logger(logger, "test.ensure", dummy_settings) is logger


def test_ensure_logger_creates_new_logger(dummy_settings):
    ensured = ensure_logger(None, "test.ensure2", dummy_settings)
    assert isinstance(ensured, logging.Logger)
    assert ensured.name == "test.ensure2"


def test_ensure_logger_raises_without_name():
    with pytest.raises(ValueError):
        ensure_logger()


def test_setup_logger_replaces_handlers():
    logger = setup_logger("test.setup", level="ERROR")
    logger = setup_logger("test.setup", level="ERROR")
    assert len(logger.handlers) == 1
    assert logger.level == logging.ERROR
    assert logger.handlers[0].stream is sys.stdout


def test_setup_logger_unknown_level_defaults_to_info():
    assert setup_logger("test.unknown", level="NOPE").level == logging.INFO


def test_json_formatter_output():
    record = logging.LogRecord(
        name="test", level=logging.INFO, pathname=__file__, lineno=10,
        msg="hello %s", args=("world",), exc_info=None,
    )
    data = json.loads(JsonFormatter().format(record))
    assert data["level"] == "INFO"
    assert data["logger"] == "test"
    assert data["message"] == "hello world"
    assert "timestamp" in data
    assert "exception" not in data


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        exc_info = sys.exc_info()
    record = logging.LogRecord(
        name="test", level=logging.ERROR, pathname=__file__, lineno=10,
        msg="failed", args=(), exc_info=exc_info,
    )
    data = json.loads(JsonFormatter().format(record))
    assert "ValueError: boom" in data["exception"]
