import itertools

import pytest

from radix_core.constants import MAX_SAFE_INTEGER, SUPPORTED_BASES
from radix_core.converter import (
    convert,
    is_valid_input,
    parse_numeral,
    render_numeral,
    validate_base,
)
from radix_core.errors import (
    ConversionError,
    EmptyInput,
    InvalidDigitsForBase,
    ParseFailure,
    UnsupportedBase,
    ValueOverflow,
)

# region Concrete conversions


@pytest.mark.parametrize(
    "value, from_base, to_base, expected",
    [
        ("1010", 2, 10, "10"),
        ("FF", 16, 2, "11111111"),
        ("ff", 16, 10, "255"),
        ("255", 10, 16, "FF"),
        ("777", 8, 2, "111111111"),
        ("0", 10, 2, "0"),
        ("0010", 2, 2, "10"),
        ("deadBEEF", 16, 8, "33653337357"),
    ],
)
def test_convert(value, from_base, to_base, expected):
    assert convert(value, from_base, to_base) == expected


def test_convert_output_is_uppercase():
    assert convert("48879", 10, 16) == "BEEF"


# endregion
# region Validation


@pytest.mark.parametrize("value", ["", " ", "\t\n"])
def test_empty_input(value):
    with pytest.raises(EmptyInput) as exc:
        convert(value, 10, 2)
    assert exc.value.message == "Please enter a number to convert"


def test_invalid_digits_names_base():
    with pytest.raises(InvalidDigitsForBase) as exc:
        convert("9", 8, 10)
    assert exc.value.base == 8
    assert exc.value.message == "Invalid characters for base-8 number"


@pytest.mark.parametrize(
    "value, base",
    [("2", 2), ("8", 8), ("1A", 10), ("G", 16), ("-1", 10), ("1.5", 10), (" 101", 2), ("0x1F", 16), ("1_000", 10)],
)
def test_rejects_characters_outside_base(value, base):
    assert not is_valid_input(value, base)
    with pytest.raises(InvalidDigitsForBase):
        convert(value, base, 10)


def test_validation_is_case_insensitive():
    assert is_valid_input("aBcDeF", 16)


def test_trailing_newline_is_not_a_digit():
    assert not is_valid_input("101\n", 2)


def test_parse_failure_backstop():
    # U+FB00 uppercases to "FF", so it passes the digit check but int() rejects it
    with pytest.raises(ParseFailure):
        convert("ﬀ", 16, 10)
    with pytest.raises(ParseFailure):
        parse_numeral("ﬀ", 16)


@pytest.mark.parametrize("base", [0, 1, 3, 36, True, 2.0, "2", None])
def test_unsupported_base(base):
    with pytest.raises(UnsupportedBase):
        validate_base(base)
    with pytest.raises(UnsupportedBase):
        convert("1", base, 10)
    with pytest.raises(UnsupportedBase):
        convert("1", 10, base)


def test_errors_are_value_errors():
    assert issubclass(ConversionError, ValueError)
    with pytest.raises(ValueError):
        convert("", 2, 10)


# endregion
# region Overflow


def test_max_safe_integer_is_accepted():
    assert convert(str(MAX_SAFE_INTEGER), 10, 16) == "1FFFFFFFFFFFFF"


def test_overflow_rejected():
    with pytest.raises(ValueOverflow) as exc:
        convert(str(MAX_SAFE_INTEGER + 1), 10, 2)
    assert exc.value.base == 10


def test_overflow_check_disabled():
    big = "1" + "0" * 40
    assert convert(big, 10, 16, max_value=None) == format(10**40, "X")


def test_custom_ceiling():
    assert convert("FF", 16, 10, max_value=255) == "255"
    with pytest.raises(ValueOverflow):
        convert("100", 16, 10, max_value=255)


# endregion
# region Properties


@pytest.mark.parametrize("base", SUPPORTED_BASES)
@pytest.mark.parametrize("value", [0, 1, 7, 10, 255, 4096, 123456789, MAX_SAFE_INTEGER])
def test_same_base_conversion_normalizes_only(base, value):
    numeral = "00" + render_numeral(value, base).lower()
    assert convert(numeral, base, base) == render_numeral(value, base).upper()


@pytest.mark.parametrize("b1, b2", list(itertools.product(SUPPORTED_BASES, repeat=2)))
def test_round_trip_preserves_value(b1, b2):
    for value in (0, 5, 64, 1000, 65535, 2**40 + 3):
        numeral = render_numeral(value, b1)
        there = convert(numeral, b1, b2)
        back = convert(there, b2, b1)
        assert int(back, b1) == value


def test_input_is_not_mutated():
    value = "ff"
    convert(value, 16, 2)
    assert value == "ff"


# endregion
