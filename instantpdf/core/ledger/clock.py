"""Calendar helpers for the ledger.

All dates are local calendar dates; "yesterday" is computed by calendar
arithmetic, not by subtracting 24 hours from the current instant.
"""
from datetime import date, datetime, timedelta
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current local wall-clock time."""
    return datetime.now()


def calendar_day(moment: datetime) -> str:
    """Return the YYYY-MM-DD date of moment."""
    return moment.date().isoformat()


def previous_calendar_day(day: str) -> str:
    """Return the calendar day before a YYYY-MM-DD date."""
    return (date.fromisoformat(day) - timedelta(days=1)).isoformat()


def epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)
