import logging
import sys
from pathlib import Path

import pytest
from sqlite_utils import Database

# Add the src directory to the path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from radix_core.history import HistoryStore  # noqa: E402
from radix_core.models import ConversionRecord  # noqa: E402

SETTINGS_ENV_VARS = [
    "CONVERTER_MAX_VALUE",
    "CONVERTER_TIME_FORMAT",
    "CONVERTER_DATE_FORMAT",
    "CONVERTER_LOCALE",
    "HISTORY_DB_PATH",
    "HISTORY_STORAGE_KEY",
    "HISTORY_LIMIT",
    "SERVER_TIMEZONE_OFFSET_HOURS",
]


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep developer environment variables from leaking into settings."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_logger() -> logging.Logger:
    return logging.getLogger("radix_tests")


@pytest.fixture
def memory_db() -> Database:
    """Provide an in-memory sqlite_utils database."""
    db = Database(memory=True)
    yield db
    db.conn.close()


@pytest.fixture
def store(memory_db, test_logger) -> HistoryStore:
    return HistoryStore(memory_db, test_logger)


@pytest.fixture
def closed_db() -> Database:
    """A database whose connection is already closed; every query fails."""
    db = Database(memory=True)
    db.conn.close()
    return db


@pytest.fixture
def make_record():
    """Factory for ConversionRecord instances with fixed stamps."""

    def _make(input_value: str = "1010", from_base: int = 2, to_base: int = 10, output: str = "10", n: int = 0):
        return ConversionRecord(
            input=input_value,
            from_base=from_base,
            to_base=to_base,
            output=output,
            timestamp=f"12:00:{n:02d}",
            date="1/31/2024",
        )

    return _make
