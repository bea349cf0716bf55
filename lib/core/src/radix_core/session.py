# region Docstring
"""
radix_core.session
Caller-side control flow: convert, record, persist.
Overview:
- A ConversionSession owns the in-memory History for one running application.
    It loads the stored History once when created and rewrites it after every
    successful conversion.
- Rejected conversions raise ConversionError before the History is touched.
- A failed save is reported on the outcome; the new record stays in memory for
    the rest of the session.
- A failed clear raises StorageError and leaves the in-memory History as it was.
"""
# endregion
# region Imports
from logging import Logger
from typing import Optional

from pydantic import BaseModel, Field

from radix_core.config import ConverterSettings
from radix_core.converter import convert
from radix_core.errors import ConversionError, StorageError
from radix_core.history import HistoryStore, record
from radix_core.models import ConversionRecord, History
from radix_core.utils import base_name, get_time

# endregion
# region Result Models


class ConversionOutcome(BaseModel):
    record: ConversionRecord = Field(..., description="The record added to the history")
    saved: bool = Field(..., description="Whether the history was persisted")
    message: Optional[str] = Field(
        None, description="User-facing notice when the history could not be saved"
    )

    @property
    def result(self) -> str:
        return self.record.output


# endregion
# region ConversionSession


class ConversionSession:
    """
    In-memory History plus the store it is mirrored to.
    """

    def __init__(
        self,
        store: HistoryStore,
        logger: Logger,
        settings: Optional[ConverterSettings] = None,
    ):
        self.store = store
        self.settings = settings or ConverterSettings()
        self.logger = logger.getChild("ConversionSession")
        self.history: History = store.load()
        self.logger.info(f"Session started with {len(self.history)} history records.")

    def convert(self, input_value: str, from_base: int, to_base: int) -> ConversionOutcome:
        """
        Convert a numeral and record it.

        Raises:
            ConversionError: The input was rejected; the History is unchanged.
        """
        try:
            output = convert(
                input_value, from_base, to_base, max_value=self.settings.max_value
            )
        except ConversionError as e:
            self.logger.info(
                f"Rejected {input_value!r} ({base_name(from_base)} -> {base_name(to_base)}): {e.name}"
            )
            raise

        rec = ConversionRecord.create(
            input_value,
            from_base,
            to_base,
            output,
            moment=get_time(),
            time_format=self.settings.time_format,
            date_format=self.settings.date_format,
        )
        self.history = record(self.history, rec, limit=self.store.limit)

        try:
            self.store.persist(self.history)
        except StorageError as e:
            return ConversionOutcome(record=rec, saved=False, message=str(e))
        return ConversionOutcome(record=rec, saved=True)

    def clear_history(self) -> None:
        """
        Remove the stored History, then empty the in-memory one.

        Raises:
            StorageError: The stored record could not be removed.
        """
        self.store.clear()
        self.history = ()


# endregion

__all__ = ["ConversionOutcome", "ConversionSession"]
