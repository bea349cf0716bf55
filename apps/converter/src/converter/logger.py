from datetime import datetime
import logging
from logging import Logger as T_Logger
from logging.config import dictConfig
from pathlib import Path

from radix_core.utils import get_time

from .config import LOG_FILE_PATH, api_settings

__log_level__ = api_settings.log_level.upper()


config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
        "standard": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
    },
    "handlers": {
        "file": {
            "class": "logging.FileHandler",
            "filename": str(LOG_FILE_PATH),
            "formatter": "json",
            "level": __log_level__,
        },
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": __log_level__,
        },
    },
    "loggers": {
        "converter_api": {
            "handlers": ["file", "console"],
            "level": __log_level__,
            "propagate": False,
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
}


def _list_archives(log_file: Path) -> list[Path]:
    """Archived log files, newest first."""
    return sorted(
        log_file.parent.glob(f"{log_file.stem}_*.jsonl"),
        key=lambda f: f.stat().st_mtime,
        reverse=True,
    )


def archive_daily_log_file(log_file: Path, now: datetime, logger: T_Logger) -> Path | None:
    """
    Rename the current log file with a timestamp, at most once every 24 hours.

    Returns:
        Path | None: The archive path, or None when nothing was archived.
    """
    archive_files = _list_archives(log_file)
    if archive_files:
        latest_archive = archive_files[0]
        timestamp_str = latest_archive.stem.replace(f"{log_file.stem}_", "")
        try:
            timestamp = datetime.strptime(timestamp_str, "%Y%m%d_%H%M%S")
        except ValueError:
            logger.warning(f"Could not parse timestamp from archive file {latest_archive}, skipping archiving.")
            return None
        if (now.replace(tzinfo=None) - timestamp).total_seconds() < 24 * 3600:
            logger.debug(f"Latest archive {latest_archive} is less than 24 hours old, skipping archiving.")
            return None

    if not log_file.exists() or log_file.stat().st_size == 0:
        return None

    archive_path = log_file.with_name(f"{log_file.stem}_{now.strftime('%Y%m%d_%H%M%S')}.jsonl")
    logger.debug(f"Archiving log file {log_file} to {archive_path}")
    log_file.rename(archive_path)
    return archive_path


def prune_log_archives(log_file: Path, days_to_keep: int, logger: T_Logger) -> list[Path]:
    """Delete all but the `days_to_keep` newest archives. Returns the deleted paths."""
    archive_files = _list_archives(log_file)
    if len(archive_files) <= days_to_keep:
        logger.debug("No old archive files to delete.")
        return []
    for archive_file in archive_files[days_to_keep:]:
        logger.debug(f"Deleting old archive file: {archive_file}")
        archive_file.unlink()
    return archive_files[days_to_keep:]


# Archive before the file handler opens the log file
_bootstrap_logger = logging.getLogger("converter_api.bootstrap")
archive_daily_log_file(LOG_FILE_PATH, get_time(), _bootstrap_logger)
prune_log_archives(LOG_FILE_PATH, api_settings.log_archive_days, _bootstrap_logger)

dictConfig(config)
logger: T_Logger = logging.getLogger("converter_api")
system_logger = logger.getChild("SYSTEM")
system_logger.debug("Logger for converter_api initialized.")
