# region Docstring
"""
radix_core.converter
Validation and conversion of numeral strings between bases 2, 8, 10 and 16.
Overview:
- Validation and parsing are two separate steps: the character-class check
    names the offending base precisely, and the integer parse is only a backstop.
- Every function here is pure; nothing touches storage.
Contents:
- validate_base(base): reject bases outside SUPPORTED_BASES.
- is_valid_input(value, base): whole-string digit check, case-insensitive.
- parse_numeral(value, base): parse to int or raise ParseFailure.
- render_numeral(value, base): render a non-negative int, uppercase.
- convert(input_value, from_base, to_base, max_value): the full pipeline.
"""
# endregion
# region Imports
from typing import Optional

from radix_core.constants import (
    BASE_DIGIT_PATTERNS,
    BASE_FORMAT_SPECS,
    MAX_SAFE_INTEGER,
    SUPPORTED_BASES,
)
from radix_core.errors import (
    EmptyInput,
    InvalidDigitsForBase,
    ParseFailure,
    UnsupportedBase,
    ValueOverflow,
)

# endregion
# region Steps


def validate_base(base: int) -> int:
    # bool is an int subclass; True must not pass for base 1
    if isinstance(base, bool) or not isinstance(base, int) or base not in SUPPORTED_BASES:
        raise UnsupportedBase(base)
    return base


def is_valid_input(value: str, base: int) -> bool:
    """
    Check that every character of `value` is a digit of `base`.

    The input is not trimmed: surrounding whitespace makes it invalid.

    Example:
        >>> is_valid_input("ff", 16)
        True
        >>> is_valid_input("102", 2)
        False
    """
    return BASE_DIGIT_PATTERNS[validate_base(base)].fullmatch(value.upper()) is not None


def parse_numeral(value: str, base: int) -> int:
    """Parse the numeral as typed; raises ParseFailure if int() rejects it."""
    try:
        return int(value, base)
    except ValueError as e:
        raise ParseFailure() from e


def render_numeral(value: int, base: int) -> str:
    """
    Render a non-negative integer in `base`, hex digits uppercase.

    Example:
        >>> render_numeral(255, 2)
        '11111111'
        >>> render_numeral(255, 16)
        'FF'
    """
    return format(value, BASE_FORMAT_SPECS[validate_base(base)])


# endregion
# region Pipeline


def convert(
    input_value: str,
    from_base: int,
    to_base: int,
    max_value: Optional[int] = MAX_SAFE_INTEGER,
) -> str:
    """
    Convert a numeral string from one base to another.

    Args:
        input_value (str): The numeral exactly as the user typed it.
        from_base (int): Base the numeral is written in.
        to_base (int): Base to render the result in.
        max_value (Optional[int]): Values above this raise ValueOverflow. None disables the check.

    Returns:
        str: The converted numeral, uppercase.

    Raises:
        UnsupportedBase: Either base is outside {2, 8, 10, 16}.
        EmptyInput: The input is empty or only whitespace.
        InvalidDigitsForBase: A character is not a digit of `from_base`.
        ParseFailure: The validated string still failed to parse.
        ValueOverflow: The value exceeds `max_value`.

    Example:
        >>> convert("1010", 2, 10)
        '10'
        >>> convert("FF", 16, 2)
        '11111111'
    """
    validate_base(from_base)
    validate_base(to_base)

    if not input_value or not input_value.strip():
        raise EmptyInput()

    if not is_valid_input(input_value, from_base):
        raise InvalidDigitsForBase(from_base)

    value = parse_numeral(input_value, from_base)

    if max_value is not None and value > max_value:
        raise ValueOverflow(base=from_base)

    return render_numeral(value, to_base).upper()


# endregion

__all__ = [
    "convert",
    "is_valid_input",
    "parse_numeral",
    "render_numeral",
    "validate_base",
]
