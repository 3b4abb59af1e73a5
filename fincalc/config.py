"""Application configuration objects and helpers.

Only the HTTP layer is configured here; calculators receive their parameters
(tax tables, iteration caps) explicitly.
"""

from __future__ import annotations

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "fincalc"
    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.DEV_MODE = _env_bool("FINCALC_DEV_MODE", default=True)
        self.CORS_ORIGINS = _env_list("FINCALC_CORS_ORIGINS", _DEFAULT_ORIGINS)
        self.LOG_LEVEL = os.getenv("FINCALC_LOG_LEVEL", "INFO").upper()
        self.LOG_JSON = _env_bool("FINCALC_LOG_JSON", default=not self.DEV_MODE)


class DevConfig(BaseConfig):
    """Development configuration."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Configuration used by the test suite."""

    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.LOG_LEVEL = "WARNING"
        self.LOG_JSON = False
