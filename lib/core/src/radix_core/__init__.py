"""
Radix core package.

Numeral validation and conversion between bases 2, 8, 10 and 16, plus the
bounded conversion history that is persisted across restarts.

Settings are Pydantic-based and read from environment variables, `.env` and
YAML files.
"""

from . import constants  # noqa: F401
from .config import (  # noqa: F401
    AppSettings,
    ConverterAPISettings,
    ConverterSettings,
    HistorySettings,
    get_settings,
)
from .converter import convert  # noqa: F401
from .errors import (  # noqa: F401
    ConversionError,
    EmptyInput,
    InvalidDigitsForBase,
    ParseFailure,
    StorageError,
    UnsupportedBase,
    ValueOverflow,
)
from .history import HistoryStore, record  # noqa: F401
from .models import ConversionRecord, History  # noqa: F401
from .session import ConversionOutcome, ConversionSession  # noqa: F401
