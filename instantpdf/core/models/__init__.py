"""Domain models for the local usage ledger."""

from instantpdf.core.models.log_entry import (
    HistoryItem,
    LogEntry,
    Outcome,
    RecentFile,
)
from instantpdf.core.models.usage import UsageStats

__all__ = [
    "HistoryItem",
    "LogEntry",
    "Outcome",
    "RecentFile",
    "UsageStats",
]
