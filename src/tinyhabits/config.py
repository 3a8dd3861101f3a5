"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int, *, maximum: int | None = None) -> int:
    """Interpret environment variable values as bounded non-negative integers."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    if parsed < 0:
        raise ValueError(f"{name} must not be negative")
    if maximum is not None and parsed > maximum:
        raise ValueError(f"{name} must be at most {maximum}")
    return parsed


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "TinyHabits"
    LOG_FILENAME = "tinyhabits.log"
    TITLE_MIN_LENGTH = 3
    TITLE_MAX_LENGTH = 200
    COLOR_MAX_LENGTH = 20
    EMAIL_MAX_LENGTH = 320
    MAX_LOOKBACK_DAYS = 3660

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("TINYHABITS_DEV_MODE", default=True)
        self.CHECKIN_LOOKBACK_DAYS = _env_int(
            "TINYHABITS_CHECKIN_LOOKBACK_DAYS", 7, maximum=self.MAX_LOOKBACK_DAYS
        )

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("TINYHABITS_DATA_DIR", "instance")
        return Path(data_root).expanduser().resolve()


class DevConfig(BaseConfig):
    """Development configuration."""

    DEBUG = True
    TESTING = False
