"""Tests for logging and configuration wiring."""

from __future__ import annotations

import json
import logging
import sys

from fincalc import config as app_config
from fincalc.logging_config import JSONFormatter, get_logger, setup_logging


def test_json_formatter_includes_extra_fields():
    formatter = JSONFormatter()
    record = logging.LogRecord(
        name="fincalc.test",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="calculation completed",
        args=(),
        exc_info=None,
    )
    record.calculator = "emi"

    log_data = json.loads(formatter.format(record))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "fincalc.test"
    assert log_data["message"] == "calculation completed"
    assert log_data["line"] == 42
    assert log_data["extra"] == {"calculator": "emi"}
    assert "timestamp" in log_data


def test_json_formatter_with_exception():
    formatter = JSONFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        exc_info = sys.exc_info()

    record = logging.LogRecord(
        name="fincalc.test",
        level=logging.ERROR,
        pathname="test.py",
        lineno=1,
        msg="failed",
        args=(),
        exc_info=exc_info,
    )

    log_data = json.loads(formatter.format(record))

    assert log_data["exception"]["type"] == "ValueError"
    assert log_data["exception"]["message"] == "boom"


def test_get_logger_namespaces_under_package():
    assert get_logger("api").name == "fincalc.api"
    assert get_logger("fincalc.core.tax").name == "fincalc.core.tax"


def test_setup_logging_replaces_handlers():
    config = app_config.TestConfig()
    logger = setup_logging(config)
    setup_logging(config)

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_json_logging_from_environment(monkeypatch):
    monkeypatch.setenv("FINCALC_DEV_MODE", "false")
    monkeypatch.delenv("FINCALC_LOG_JSON", raising=False)

    config = app_config.BaseConfig()
    logger = setup_logging(config)

    assert config.LOG_JSON is True
    assert isinstance(logger.handlers[0].formatter, JSONFormatter)


def test_cors_origins_from_environment(monkeypatch):
    monkeypatch.setenv("FINCALC_CORS_ORIGINS", "https://a.example, https://b.example")

    assert app_config.BaseConfig().CORS_ORIGINS == ["https://a.example", "https://b.example"]
