"""
radix_core.models
Domain models for conversions and their persisted history.
"""

from .conversion_record import (  # noqa: F401
    ConversionRecord,
    History,
    dump_history,
    parse_history,
)

__models__ = ["ConversionRecord", "History"]
__all__ = [*__models__, "dump_history", "parse_history"]
