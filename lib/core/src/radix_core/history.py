# region Docstring
"""
radix_core.history
Bounded, durably persisted history of successful conversions.
Overview:
- The whole History is stored as one JSON value under a single key in a
    sqlite_utils key/value table, and rewritten in full on every mutation.
- `record()` is a pure transformation; persisting is a separate explicit step.
Contents:
- record(existing, rec, limit):
    New History with `rec` prepended, truncated to `limit`. No deduplication.
- HistoryStore:
    - load(): read the stored History; absent or unreadable data yields an empty
      History and is logged, never raised.
    - persist(history): upsert the serialized History in one transaction;
      raises StorageError on failure.
    - clear(): delete the stored row entirely; raises StorageError on failure.
    - from_settings(): opens the database on first use, so an unusable path
      degrades to an empty History instead of failing at startup.
Design notes:
- History is at most a handful of rows, so a whole-value rewrite keeps the
    storage free of incremental or transactional bookkeeping.
- An upsert is a single sqlite statement inside a transaction, so readers never
    see a half-written value.
"""
# endregion
# region Imports
import sqlite3
from logging import Logger
from typing import Callable, Optional

from sqlite_utils import Database
from sqlite_utils.db import NotFoundError, Table

from radix_core.config import HistorySettings
from radix_core.constants import HISTORY_LIMIT, HISTORY_STORAGE_KEY, HISTORY_TABLE
from radix_core.errors import StorageError
from radix_core.models import ConversionRecord, History, dump_history, parse_history
from radix_core.utils import get_time_iso

# endregion
# region History Policy


def record(
    existing: History, rec: ConversionRecord, limit: int = HISTORY_LIMIT
) -> History:
    """Prepend a record and drop everything past `limit`."""
    return (rec, *existing)[:limit]


# endregion
# region HistoryStore


class HistoryStore:
    """
    Persists a History under a single named record.
    """

    def __init__(
        self,
        db: Optional[Database],
        logger: Logger,
        key: str = HISTORY_STORAGE_KEY,
        limit: int = HISTORY_LIMIT,
        table_name: str = HISTORY_TABLE,
        opener: Optional[Callable[[], Database]] = None,
    ):
        """
        Args:
            db (Optional[Database]): The sqlite_utils database holding the record,
                or None to open it with `opener` on first use.
            logger (Logger): The logger instance for logging.
            key (str): Name of the durable record.
            limit (int): Maximum number of records returned by load().
            table_name (str): Key/value table the record lives in.
            opener (Optional[Callable[[], Database]]): Opens the database when `db` is None.
        """
        if db is None and opener is None:
            raise ValueError("HistoryStore needs a database or an opener.")
        self.db = db
        self.opener = opener
        self.key = key
        self.limit = limit
        self.table_name = table_name
        self.logger = logger.getChild("HistoryStore")

    @classmethod
    def from_settings(
        cls, settings: HistorySettings, logger: Logger
    ) -> "HistoryStore":
        """Store whose database is opened on first use, so a bad path never blocks startup."""
        return cls(
            None,
            logger,
            key=settings.storage_key,
            limit=settings.limit,
            opener=lambda: settings.db,
        )

    @property
    def table(self) -> Table:
        # Retried on every call until the open succeeds
        if self.db is None:
            self.db = self.opener()
        return self.db.table(self.table_name)

    def _read_raw(self) -> Optional[str]:
        if not self.table.exists():
            return None
        try:
            row = self.table.get(self.key)
        except NotFoundError:
            return None
        return row["value"]

    def load(self) -> History:
        """Read the stored History. Never raises; falls back to an empty History."""
        try:
            raw = self._read_raw()
        except (OSError, sqlite3.Error) as e:
            self.logger.error(f"Failed to read history '{self.key}': {e}")
            return ()

        if raw is None:
            self.logger.debug(f"No saved history found under '{self.key}'.")
            return ()

        try:
            history = parse_history(raw)
        except ValueError as e:
            self.logger.warning(f"Discarding unreadable history '{self.key}': {e}")
            return ()

        self.logger.debug(f"Loaded {len(history)} history records.")
        return history[: self.limit]

    def persist(self, history: History) -> None:
        """Replace the stored History with `history`."""
        payload = dump_history(history)
        try:
            self.table.upsert(
                {"key": self.key, "value": payload, "updated_at": get_time_iso()},
                pk="key",
                alter=True,
            )
        except (OSError, sqlite3.Error) as e:
            self.logger.error(f"Failed to save history '{self.key}': {e}")
            raise StorageError("Failed to save history") from e
        self.logger.debug(f"Saved {len(history)} history records.")

    def clear(self) -> None:
        """Remove the stored record. Clearing an absent record is a no-op."""
        try:
            if self.table.exists():
                self.table.delete(self.key)
        except NotFoundError:
            self.logger.debug(f"No saved history to clear under '{self.key}'.")
        except (OSError, sqlite3.Error) as e:
            self.logger.error(f"Failed to clear history '{self.key}': {e}")
            raise StorageError("Failed to clear history") from e
        else:
            self.logger.info(f"Cleared history '{self.key}'.")


# endregion

__all__ = ["HistoryStore", "record"]
