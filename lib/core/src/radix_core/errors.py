# region Docstring
"""
radix_core.errors
Exception types raised by the converter and the history store.
Contents:
- ConversionError (ValueError):
    Base class for every rejected conversion. Carries a user-facing `message`
    and, where relevant, the `base` whose rules were violated.
    - EmptyInput: nothing (or only whitespace) was entered.
    - InvalidDigitsForBase: a character is outside the source base's digit set.
    - ParseFailure: the numeral passed validation but could not be parsed.
    - ValueOverflow: the value exceeds the configured integer ceiling.
    - UnsupportedBase: a base outside {2, 8, 10, 16} was requested.
- StorageError (RuntimeError):
    The durable history record could not be written or removed.
"""
# endregion
from typing import Optional


class ConversionError(ValueError):
    """A numeral could not be converted. Nothing is recorded."""

    default_message = "Conversion failed. Please check your input."

    def __init__(self, message: Optional[str] = None, *, base: Optional[int] = None):
        self.message = message or self.default_message
        self.base = base
        super().__init__(self.message)

    @property
    def name(self) -> str:
        return type(self).__name__


class EmptyInput(ConversionError):
    default_message = "Please enter a number to convert"


class InvalidDigitsForBase(ConversionError):
    def __init__(self, base: int, message: Optional[str] = None):
        super().__init__(message or f"Invalid characters for base-{base} number", base=base)


class ParseFailure(ConversionError):
    default_message = "Invalid number format"


class ValueOverflow(ConversionError):
    default_message = "Value exceeds the supported integer range"


class UnsupportedBase(ConversionError):
    def __init__(self, base: object, message: Optional[str] = None):
        super().__init__(
            message or f"Only these bases are supported: 2, 8, 10, 16 (got {base!r})",
            base=base if isinstance(base, int) else None,
        )


class StorageError(RuntimeError):
    """The persisted history record could not be written or removed."""


__all__ = [
    "ConversionError",
    "EmptyInput",
    "InvalidDigitsForBase",
    "ParseFailure",
    "StorageError",
    "UnsupportedBase",
    "ValueOverflow",
]
