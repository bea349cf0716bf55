"""
radix_core.constants
Shared constants for numeral validation, rendering and history storage.
"""

import re
from typing import Literal

Base = Literal[2, 8, 10, 16]
"""Type of a supported radix selector."""

SUPPORTED_BASES: tuple[int, ...] = (2, 8, 10, 16)

BASE_NAMES: dict[int, str] = {
    2: "Binary",
    8: "Octal",
    10: "Decimal",
    16: "Hexadecimal",
}

# Matched against the uppercased input, whole string.
BASE_DIGIT_PATTERNS: dict[int, re.Pattern[str]] = {
    2: re.compile(r"[01]+"),
    8: re.compile(r"[0-7]+"),
    10: re.compile(r"[0-9]+"),
    16: re.compile(r"[0-9A-F]+"),
}

BASE_FORMAT_SPECS: dict[int, str] = {
    2: "b",
    8: "o",
    10: "d",
    16: "X",
}

MAX_SAFE_INTEGER: int = 2**53 - 1
"""Largest integer the original host represented exactly."""

HISTORY_LIMIT: int = 10
HISTORY_STORAGE_KEY: str = "conversionHistory"
HISTORY_TABLE: str = "storage"
