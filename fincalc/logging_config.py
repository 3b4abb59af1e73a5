"""Logging configuration: readable console output in dev, JSON lines otherwise."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from fincalc.config import BaseConfig

ROOT_LOGGER = "fincalc"


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    # Standard LogRecord attributes that should not be treated as extra fields
    _STANDARD_ATTRS = set(
        logging.LogRecord("", 0, "", 0, "", (), None).__dict__
    ) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        # fields passed via logger.info(..., extra={...})
        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self._STANDARD_ATTRS
        }
        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data, default=str)


def setup_logging(config: BaseConfig) -> logging.Logger:
    """Attach a single console handler to the package logger.

    Args:
        config: Application configuration with LOG_LEVEL, LOG_JSON and DEV_MODE

    Returns:
        The configured package logger
    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(config.LOG_LEVEL)

    # Remove existing handlers to avoid duplicates when the app is rebuilt
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    if config.LOG_JSON:
        handler.setFormatter(JSONFormatter())
    elif config.DEV_MODE:
        handler.setFormatter(
            logging.Formatter(
                fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
                datefmt="%H:%M:%S",
            )
        )
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    root_logger.addHandler(handler)

    root_logger.debug("Logging initialized", extra={"json": config.LOG_JSON})
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
