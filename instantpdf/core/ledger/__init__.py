"""Local usage ledger stores."""
from instantpdf.core.ledger.favorites import FavoritesSet
from instantpdf.core.ledger.log_store import BoundedLogStore, ProcessingHistory, RecentFiles
from instantpdf.core.ledger.service import LedgerService
from instantpdf.core.ledger.summary import LedgerSummary, format_bytes
from instantpdf.core.ledger.usage_ledger import UsageLedger, next_streak

__all__ = [
    "BoundedLogStore",
    "FavoritesSet",
    "LedgerService",
    "LedgerSummary",
    "ProcessingHistory",
    "RecentFiles",
    "UsageLedger",
    "format_bytes",
    "next_streak",
]
