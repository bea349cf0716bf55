"""
Configuration settings for the Converter application.

This module provides the settings instances used by the service, as well as
the paths for logs and the history database.

Attributes:
    app_settings: Application-wide settings instance.
    api_settings: Converter API-specific settings (PORT, HOST, LOG_LEVEL).
    converter_settings: Overflow ceiling and record stamp formats.
    history_settings: History database path, storage key and length cap.
    LOG_FILE_PATH: Path to the JSON-lines log file.
"""

from pathlib import Path

from radix_core.config import (
    AppSettings,
    ConverterAPISettings,
    ConverterSettings,
    HistorySettings,
    get_settings,
)

app_settings: AppSettings = get_settings(AppSettings)
"""Application-wide settings instance."""
api_settings: ConverterAPISettings = get_settings(ConverterAPISettings)
"""Converter API-specific settings instance: ('PORT', 'HOST', and 'LOG_LEVEL')."""
converter_settings: ConverterSettings = get_settings(ConverterSettings)
"""Conversion engine settings instance."""
history_settings: HistorySettings = get_settings(HistorySettings)
"""Persisted history settings instance."""

LOG_FILE_PATH: Path = app_settings.logs_dir / "converter_api.jsonl"
"""Path to the JSON-lines log file."""

LOG_FILE_PATH.parent.mkdir(parents=True, exist_ok=True)
