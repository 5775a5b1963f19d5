"""
LedgerService - the local usage ledger for one profile.

Constructed once at application start and passed to whatever needs it.
Owns the four stores; each reads its prior state once, here, and persists
independently under its own key.
"""
import logging
from typing import List, Optional

from instantpdf.core.ledger.clock import Clock
from instantpdf.core.ledger.favorites import FavoritesSet
from instantpdf.core.ledger.log_store import ProcessingHistory, RecentFiles
from instantpdf.core.ledger.summary import LedgerSummary
from instantpdf.core.ledger.usage_ledger import UsageLedger
from instantpdf.core.models.log_entry import HistoryItem, Outcome, RecentFile
from instantpdf.core.models.usage import UsageStats
from instantpdf.core.ports.persistence import LoadStatus, PersistencePort

logger = logging.getLogger(__name__)


class LedgerService:
    """Usage stats, processing history, recent files and favorites."""

    def __init__(self, persistence: PersistencePort, clock: Optional[Clock] = None):
        """Initialize all stores from persistence.

        Args:
            persistence: Storage medium shared by the four stores
            clock: Time source (local wall clock by default)
        """
        self.usage_ledger = UsageLedger(persistence, clock=clock)
        self.history_store = ProcessingHistory(persistence, clock=clock)
        self.recent_files_store = RecentFiles(persistence, clock=clock)
        self.favorites_set = FavoritesSet(persistence)

        fallbacks = {
            name: status.value
            for name, status in self.load_outcomes().items()
            if status not in (LoadStatus.FOUND, LoadStatus.MISSING)
        }
        if fallbacks:
            logger.warning(f"Ledger stores fell back to defaults: {fallbacks}")

    def load_outcomes(self) -> dict:
        """LoadStatus of each store from construction."""
        return {
            "usage_stats": self.usage_ledger.load_outcome,
            "history": self.history_store.load_outcome,
            "recent_files": self.recent_files_store.load_outcome,
            "favorites": self.favorites_set.load_outcome,
        }

    # Usage stats

    @property
    def stats(self) -> UsageStats:
        return self.usage_ledger.stats

    def record_operation(
        self,
        tool_identifier: str,
        file_count: int,
        total_size_bytes: int,
        success: bool,
    ) -> UsageStats:
        return self.usage_ledger.record_operation(
            tool_identifier, file_count, total_size_bytes, success
        )

    def reset_stats(self) -> None:
        self.usage_ledger.reset_stats()

    def summary(self) -> LedgerSummary:
        return LedgerSummary.from_stats(self.usage_ledger.stats)

    # Processing history

    @property
    def history(self) -> List[HistoryItem]:
        return self.history_store.history

    def add_to_history(
        self,
        display_name: str,
        tool_identifier: str,
        tool_display_name: str,
        size_bytes: int,
        outcome: Outcome,
        operation: str = "",
    ) -> HistoryItem:
        return self.history_store.add_to_history(
            display_name, tool_identifier, tool_display_name, size_bytes, outcome, operation
        )

    def remove_from_history(self, entry_id: str) -> None:
        self.history_store.remove_from_history(entry_id)

    def clear_history(self) -> None:
        self.history_store.clear_history()

    # Recent files

    @property
    def recent_files(self) -> List[RecentFile]:
        return self.recent_files_store.recent_files

    def add_recent_file(
        self,
        display_name: str,
        tool_identifier: str,
        tool_display_name: str,
        size_bytes: int,
    ) -> RecentFile:
        return self.recent_files_store.add_recent_file(
            display_name, tool_identifier, tool_display_name, size_bytes
        )

    def remove_recent_file(self, entry_id: str) -> None:
        self.recent_files_store.remove_recent_file(entry_id)

    def clear_recent_files(self) -> None:
        self.recent_files_store.clear_recent_files()

    # Favorites

    @property
    def favorites(self) -> List[str]:
        return self.favorites_set.favorites

    def toggle_favorite(self, tool_identifier: str) -> bool:
        return self.favorites_set.toggle_favorite(tool_identifier)

    def is_favorite(self, tool_identifier: str) -> bool:
        return self.favorites_set.is_favorite(tool_identifier)
