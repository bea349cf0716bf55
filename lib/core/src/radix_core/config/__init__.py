"""
radix_core.config
Configuration and settings management for the radix converter.
Overview:
- Provides Pydantic-based settings classes for the converter engine, the
    history store and the HTTP service.
- Each settings class inherits from FactoryBaseSettings and supports environment
    variable overrides via Field aliases.
Contents:
- Settings Classes:
    - AppSettings:
        Global settings: app root, environment, server timezone, and the derived
        logs directory.
    - ConverterSettings:
        Overflow ceiling and the strftime formats used to stamp history records.
    - HistorySettings:
        SQLite path, storage key and length cap of the persisted history, with a
        convenience property for database access.
    - ConverterAPISettings:
        Host, port, log level and log archive retention for the HTTP service.
Design Notes:
- Default values are provided for all fields enabling zero-configuration startup.
- `CONVERTER_MAX_VALUE` accepts an empty string, "none" or "null" to disable the
    overflow check.
"""

import sqlite3
from datetime import timedelta, timezone
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator
from sqlite_utils import Database

from radix_core.config.base import APP_ENV, APP_ROOT, DATA_DIR
from radix_core.config.factory import FactoryBaseSettings
from radix_core.config.factory import get_settings  # noqa: F401  This is used externally
from radix_core.constants import (
    HISTORY_LIMIT,
    HISTORY_STORAGE_KEY,
    MAX_SAFE_INTEGER,
)


class AppSettings(FactoryBaseSettings):
    """Application configuration settings."""

    app_root: Path = Field(
        default=Path(APP_ROOT),
        description="Root directory for application data storage.",
    )
    environment: str = Field(
        default=APP_ENV,
        description="Current application environment (prod, docker, dev).",
        alias="ENVIRONMENT",
    )
    tz_offset_hours: int = Field(
        default=0,
        ge=-23,
        le=23,
        description="UTC offset in hours used to stamp conversions.",
        alias="SERVER_TIMEZONE_OFFSET_HOURS",
    )

    @property
    def tz(self) -> timezone:
        """Timezone used to stamp conversions."""
        return timezone(timedelta(hours=self.tz_offset_hours))

    @property
    def logs_dir(self) -> Path:
        """Base directory for logs."""
        return self.app_root / "logs"


class ConverterSettings(FactoryBaseSettings):
    """
    Conversion engine settings.
    """

    max_value: Optional[int] = Field(
        default=MAX_SAFE_INTEGER,
        alias="CONVERTER_MAX_VALUE",
        description="Largest accepted value; None disables the overflow check.",
    )
    time_format: str = Field(
        default="%X",
        alias="CONVERTER_TIME_FORMAT",
        description="strftime format for the record timestamp (locale time).",
    )
    date_format: str = Field(
        default="%x",
        alias="CONVERTER_DATE_FORMAT",
        description="strftime format for the record date (locale date).",
    )
    locale: Optional[str] = Field(
        default=None,
        alias="CONVERTER_LOCALE",
        description="LC_TIME locale applied at startup, e.g. 'en_US.UTF-8'.",
    )

    @field_validator("max_value", mode="before")
    def parse_max_value(cls, v: Any) -> Any:
        if isinstance(v, str) and v.strip().lower() in {"", "none", "null"}:
            return None
        return v


class HistorySettings(FactoryBaseSettings):
    """
    Persisted conversion history settings.
    """

    db_path: Path = Field(
        default=DATA_DIR / "history.db",
        alias="HISTORY_DB_PATH",
        description="Path to the SQLite database holding the history record.",
    )
    storage_key: str = Field(
        default=HISTORY_STORAGE_KEY,
        alias="HISTORY_STORAGE_KEY",
        description="Name of the durable record the history is stored under.",
    )
    limit: int = Field(
        default=HISTORY_LIMIT,
        ge=1,
        alias="HISTORY_LIMIT",
        description="Maximum number of records kept.",
    )

    @property
    def db(self) -> Database:
        """
        Open the history database, creating its directory if needed.

        The connection is shared with the service's worker threads, which take
        turns using it one storage call at a time.

        Raises:
            OSError: The directory could not be created.
            sqlite3.Error: The database file could not be opened.
        """
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        return Database(sqlite3.connect(self.db_path, check_same_thread=False))


class ConverterAPISettings(FactoryBaseSettings):
    """
    Converter API configuration settings.
    """

    host: str = Field(
        default="localhost",
        alias="CONVERTER_API_HOST",
        description="Host for the Converter API server.",
    )
    port: int = Field(
        default=8112,
        alias="CONVERTER_API_PORT",
        description="Port for the Converter API server.",
    )
    log_level: str = Field(
        default="info",
        alias="CONVERTER_API_LOG_LEVEL",
        description="Log level for the Converter API server.",
    )
    log_archive_days: int = Field(
        default=10,
        alias="CONVERTER_API_LOG_ARCHIVE_DAYS",
        description="Number of archived daily log files to keep.",
    )


__all__ = [
    "AppSettings",
    "ConverterAPISettings",
    "ConverterSettings",
    "HistorySettings",
    "get_settings",
]
