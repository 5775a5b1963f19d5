"""
Bounded log stores.

A newest-first, capacity-bounded list persisted as one JSON document.
Capacity is enforced on every add; every mutation rewrites the full list.
Instantiated as ProcessingHistory and RecentFiles.
"""
import logging
import uuid
from typing import Generic, List, Optional, Type, TypeVar

from instantpdf.config.ledger_limits import (
    HISTORY_KEY,
    MAX_HISTORY_ITEMS,
    MAX_RECENT_FILES,
    RECENT_FILES_KEY,
)
from instantpdf.core.exceptions import StorageError
from instantpdf.core.ledger.clock import Clock, epoch_millis, system_clock
from instantpdf.core.models.log_entry import HistoryItem, LogEntry, Outcome, RecentFile
from instantpdf.core.ports.persistence import LoadStatus, PersistencePort

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=LogEntry)


class BoundedLogStore(Generic[E]):
    """Capacity-bounded, newest-first persisted list of log entries.

    Args:
        persistence: Storage medium shared with the other stores
        key: Storage key owned by this store
        capacity: Maximum number of entries kept
        entry_type: LogEntry subclass used to decode persisted entries
        dedup_by_key: Replace entries with the same (display_name, tool_identifier)
        clock: Time source for ids and timestamps
    """

    def __init__(
        self,
        persistence: PersistencePort,
        key: str,
        capacity: int,
        entry_type: Type[E],
        dedup_by_key: bool = False,
        clock: Optional[Clock] = None,
    ):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._persistence = persistence
        self._key = key
        self.capacity = capacity
        self._entry_type = entry_type
        self._dedup_by_key = dedup_by_key
        self._clock = clock or system_clock
        self._entries: List[E] = []
        self.load_outcome = self._load()

    def _load(self) -> LoadStatus:
        """Read the persisted list; anything unusable yields an empty list."""
        result = self._persistence.load(self._key)
        if not result.found:
            if result.status is not LoadStatus.MISSING:
                logger.warning(f"Starting {self._key} empty ({result.status.value}): {result.error}")
            return result.status
        if not isinstance(result.value, list):
            logger.warning(f"Starting {self._key} empty: expected a list")
            return LoadStatus.CORRUPT

        entries = []
        for raw in result.value:
            entry = self._entry_type.from_dict(raw)
            if entry is None:
                logger.warning(f"Skipping malformed entry in {self._key}")
                continue
            entries.append(entry)
        self._entries = entries[:self.capacity]
        return LoadStatus.FOUND

    def _persist(self) -> None:
        """Write the full list; write failures leave the in-memory list intact."""
        try:
            self._persistence.save(self._key, [e.to_dict() for e in self._entries])
        except StorageError as e:
            logger.warning(f"Could not persist {self._key}: {e}")

    @property
    def entries(self) -> List[E]:
        """Entries, newest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, **fields) -> E:
        """Stamp, prepend and persist a new entry.

        Args:
            **fields: Entry fields other than id and created_at

        Returns:
            The stored entry
        """
        if fields.get("size_bytes", 0) < 0:
            raise ValueError("size_bytes must be non-negative")
        now = self._clock()
        entry = self._entry_type(
            id=f"{epoch_millis(now)}-{uuid.uuid4().hex[:9]}",
            created_at=now,
            **fields,
        )
        entries = self._entries
        if self._dedup_by_key:
            entries = [e for e in entries if e.dedup_key != entry.dedup_key]
        self._entries = [entry, *entries][:self.capacity]
        self._persist()
        return entry

    def remove(self, entry_id: str) -> None:
        """Remove the entry with entry_id; no-op if absent."""
        remaining = [e for e in self._entries if e.id != entry_id]
        if len(remaining) == len(self._entries):
            return
        self._entries = remaining
        self._persist()

    def clear(self) -> None:
        self._entries = []
        self._persist()


class ProcessingHistory(BoundedLogStore[HistoryItem]):
    """Outcome log of the last processed operations."""

    def __init__(self, persistence: PersistencePort, clock: Optional[Clock] = None):
        super().__init__(
            persistence,
            key=HISTORY_KEY,
            capacity=MAX_HISTORY_ITEMS,
            entry_type=HistoryItem,
            clock=clock,
        )

    @property
    def history(self) -> List[HistoryItem]:
        return self.entries

    def add_to_history(
        self,
        display_name: str,
        tool_identifier: str,
        tool_display_name: str,
        size_bytes: int,
        outcome: Outcome,
        operation: str = "",
    ) -> HistoryItem:
        return self.add(
            display_name=display_name,
            tool_identifier=tool_identifier,
            tool_display_name=tool_display_name,
            size_bytes=size_bytes,
            outcome=Outcome(outcome),
            operation=operation,
        )

    def remove_from_history(self, entry_id: str) -> None:
        self.remove(entry_id)

    def clear_history(self) -> None:
        self.clear()


class RecentFiles(BoundedLogStore[RecentFile]):
    """Reopen shortcuts, one per (file name, tool) pair."""

    def __init__(self, persistence: PersistencePort, clock: Optional[Clock] = None):
        super().__init__(
            persistence,
            key=RECENT_FILES_KEY,
            capacity=MAX_RECENT_FILES,
            entry_type=RecentFile,
            dedup_by_key=True,
            clock=clock,
        )

    @property
    def recent_files(self) -> List[RecentFile]:
        return self.entries

    def add_recent_file(
        self,
        display_name: str,
        tool_identifier: str,
        tool_display_name: str,
        size_bytes: int,
    ) -> RecentFile:
        return self.add(
            display_name=display_name,
            tool_identifier=tool_identifier,
            tool_display_name=tool_display_name,
            size_bytes=size_bytes,
        )

    def remove_recent_file(self, entry_id: str) -> None:
        self.remove(entry_id)

    def clear_recent_files(self) -> None:
        self.clear()
