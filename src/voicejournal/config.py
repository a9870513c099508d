"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()

_WEEKDAY_NAMES = {
    name: index
    for index, name in enumerate(
        ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
    )
}


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from exc


def parse_first_weekday(value: str | int) -> int:
    """Return a :mod:`calendar` weekday number (Monday=0) from a name or number."""

    if isinstance(value, int):
        candidate = value
    else:
        text = value.strip().lower()
        if text in _WEEKDAY_NAMES:
            return _WEEKDAY_NAMES[text]
        try:
            candidate = int(text)
        except ValueError as exc:
            raise ConfigError(f"Unknown weekday {value!r}") from exc
    if not 0 <= candidate <= 6:
        raise ConfigError(f"Weekday number must be between 0 and 6, got {candidate}")
    return candidate


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "VoiceJournal"
    DB_FILENAME = "voicejournal.db"
    DEFAULT_TRAILING_DAYS = 90
    SQLITE_PRAGMAS = {"journal_mode": "wal", "foreign_keys": "on"}

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("VOICEJOURNAL_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("VOICEJOURNAL_DATABASE_URL", self._build_sqlite_url())
        self.TRAILING_DAYS = _env_int("VOICEJOURNAL_TRAILING_DAYS", self.DEFAULT_TRAILING_DAYS)
        if self.TRAILING_DAYS < 0:
            raise ConfigError("VOICEJOURNAL_TRAILING_DAYS must not be negative.")
        self.FIRST_WEEKDAY = parse_first_weekday(os.getenv("VOICEJOURNAL_FIRST_WEEKDAY", "sunday"))
        self.TIMEZONE = self._resolve_timezone(os.getenv("VOICEJOURNAL_TIMEZONE"))

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("VOICEJOURNAL_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _resolve_timezone(name: Optional[str]) -> Optional[ZoneInfo]:
        if not name:
            return None
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigError(f"Unknown timezone {name!r}") from exc

    def _build_sqlite_url(self) -> str:
        """Construct the default SQLite URL inside the data directory."""

        db_path = self.DATA_DIR / self.DB_FILENAME
        return f"sqlite:///{db_path}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        connect_args: dict[str, Any] = {"check_same_thread": False}
        return {"connect_args": connect_args}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """In-memory database for tests and throwaway sessions."""

    __test__ = False  # keep pytest from collecting this class

    DEBUG = False
    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.DATABASE_URL = "sqlite://"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        from sqlalchemy.pool import StaticPool

        options = super().sqlalchemy_engine_options()
        options["poolclass"] = StaticPool
        return options
