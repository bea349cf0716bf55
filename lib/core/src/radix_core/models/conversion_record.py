# region Docstring
"""
radix_core.models.conversion_record
Domain model for one successful conversion and the history that holds them.
Overview:
- ConversionRecord is a frozen Pydantic model. Field names are snake_case in
    Python; the persisted JSON keeps the camelCase keys `fromBase` / `toBase`.
- History is a plain tuple of records, most recent first.
Contents:
- ConversionRecord:
    input, from_base, output, to_base, timestamp (locale time of day) and
    date (locale calendar date). `create()` stamps a record from a datetime.
- History:
    Type alias for `tuple[ConversionRecord, ...]`.
- dump_history / parse_history:
    JSON serialization of a History through a TypeAdapter. Every field
    round-trips verbatim, including both date strings.
Design notes:
- `input` keeps the case the user typed; only `output` is normalized.
"""
# endregion
# region Imports
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from radix_core.constants import Base
from radix_core.utils import format_calendar_date, format_time_of_day, get_time

# endregion
# region Pydantic Model


class ConversionRecord(BaseModel):
    input: str = Field(..., description="The numeral as typed by the user")
    from_base: Base = Field(..., alias="fromBase", description="Base of the input")
    output: str = Field(..., description="The converted numeral, uppercase")
    to_base: Base = Field(..., alias="toBase", description="Base of the output")
    timestamp: str = Field(..., description="Locale-formatted time of the conversion")
    date: str = Field(..., description="Locale-formatted date of the conversion")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "input": "ff",
                    "fromBase": 16,
                    "output": "11111111",
                    "toBase": 2,
                    "timestamp": "14:03:22",
                    "date": "10/19/26",
                }
            ]
        },
    )

    @classmethod
    def create(
        cls,
        input_value: str,
        from_base: int,
        to_base: int,
        output: str,
        moment: Optional[datetime] = None,
        time_format: str = "%X",
        date_format: str = "%x",
    ) -> "ConversionRecord":
        """Build a record stamped with `moment` (defaults to now)."""
        moment = moment or get_time()
        return cls(
            input=input_value,
            from_base=from_base,
            output=output,
            to_base=to_base,
            timestamp=format_time_of_day(moment, time_format),
            date=format_calendar_date(moment, date_format),
        )


# endregion
# region History

History = tuple[ConversionRecord, ...]

_history_adapter = TypeAdapter(list[ConversionRecord])


def dump_history(history: History) -> str:
    """Serialize a History to a JSON array using the persisted key names."""
    return _history_adapter.dump_json(list(history), by_alias=True).decode("utf-8")


def parse_history(raw: Union[str, bytes]) -> History:
    """
    Parse a JSON array back into a History.

    Raises:
        ValueError: The payload is not valid JSON or a record is malformed
            (pydantic's ValidationError is a ValueError).
    """
    return tuple(_history_adapter.validate_json(raw))


# endregion

__all__ = ["ConversionRecord", "History", "dump_history", "parse_history"]
