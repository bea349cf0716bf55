import locale
from datetime import datetime
from typing import Optional

from radix_core.config import AppSettings, get_settings
from radix_core.constants import BASE_NAMES


def get_time() -> datetime:
    """
    Get the current time in the configured server timezone.

    Returns:
        datetime: Timezone-aware current time.

    Example:
        >>> get_time().tzinfo is not None
        True
    """
    return datetime.now(get_settings(AppSettings).tz)


def get_time_iso() -> str:
    """Current time as an ISO 8601 string."""
    return get_time().isoformat()


def format_time_of_day(moment: datetime, fmt: str = "%X") -> str:
    """
    Render the time-of-day part of a datetime using the active LC_TIME locale.

    Example:
        >>> format_time_of_day(datetime(2024, 1, 1, 9, 5, 7), "%H:%M:%S")
        '09:05:07'
    """
    return moment.strftime(fmt)


def format_calendar_date(moment: datetime, fmt: str = "%x") -> str:
    """
    Render the calendar-date part of a datetime using the active LC_TIME locale.

    Example:
        >>> format_calendar_date(datetime(2024, 1, 31), "%Y-%m-%d")
        '2024-01-31'
    """
    return moment.strftime(fmt)


def set_time_locale(name: Optional[str]) -> Optional[str]:
    """
    Apply an LC_TIME locale so %X / %x render like the user's system.

    Args:
        name (Optional[str]): Locale name such as 'en_US.UTF-8'. None leaves the locale alone.

    Returns:
        Optional[str]: The locale now in effect, or None when nothing was changed.

    Raises:
        ValueError: If the locale is not available on this system.
    """
    if not name:
        return None
    try:
        return locale.setlocale(locale.LC_TIME, name)
    except locale.Error as e:
        raise ValueError(f"Unsupported locale {name!r}: {e}") from e


def base_name(base: int) -> str:
    """
    Human-readable name of a base.

    Example:
        >>> base_name(16)
        'Hexadecimal'
        >>> base_name(3)
        'Base 3'
    """
    return BASE_NAMES.get(base, f"Base {base}")
