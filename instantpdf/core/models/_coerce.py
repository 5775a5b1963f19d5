"""Lenient field readers for persisted ledger records."""

from datetime import date, datetime
from typing import Any, Optional


def non_negative_int(value: Any, default: int = 0) -> int:
    """Return value as a non-negative int, or default if it cannot be one."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value >= 0 else default
    if isinstance(value, float) and value.is_integer() and value >= 0:
        return int(value)
    return default


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string or epoch milliseconds into a datetime."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def parse_calendar_date(value: Any) -> Optional[str]:
    """Return value as a canonical YYYY-MM-DD string, or None if it is not a date."""
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        return None
