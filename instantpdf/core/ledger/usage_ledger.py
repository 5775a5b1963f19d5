"""
Usage ledger.

Monotonic operation counters, per-tool frequency and a consecutive-day
streak, persisted as a single document after every mutation.
"""
import logging
from dataclasses import replace
from typing import Optional

from instantpdf.config.ledger_limits import USAGE_STATS_KEY
from instantpdf.core.exceptions import StorageError
from instantpdf.core.ledger.clock import (
    Clock,
    calendar_day,
    previous_calendar_day,
    system_clock,
)
from instantpdf.core.models._coerce import non_negative_int
from instantpdf.core.models.usage import UsageStats
from instantpdf.core.ports.persistence import LoadStatus, PersistencePort

logger = logging.getLogger(__name__)


def next_streak(streak_days: int, last_used_date: Optional[str], today: str) -> int:
    """Streak after an operation recorded on today.

    Continues on the day after last use, stays put (but at least 1) on the
    same day and restarts at 1 after a gap or on first use.
    """
    if last_used_date == previous_calendar_day(today):
        return streak_days + 1
    if last_used_date != today:
        return 1
    return max(streak_days, 1)


class UsageLedger:
    """Owner of the UsageStats record.

    Args:
        persistence: Storage medium shared with the other stores
        clock: Time source (local wall clock by default)
        key: Storage key owned by this ledger
    """

    def __init__(
        self,
        persistence: PersistencePort,
        clock: Optional[Clock] = None,
        key: str = USAGE_STATS_KEY,
    ):
        self._persistence = persistence
        self._clock = clock or system_clock
        self._key = key
        self._stats = UsageStats()
        self.load_outcome = self._load()

    def _load(self) -> LoadStatus:
        result = self._persistence.load(self._key)
        if not result.found:
            if result.status is not LoadStatus.MISSING:
                logger.warning(f"Using default usage stats ({result.status.value}): {result.error}")
            return result.status
        if not isinstance(result.value, dict):
            logger.warning("Using default usage stats: expected an object")
            return LoadStatus.CORRUPT

        self._stats = UsageStats.from_dict(result.value)
        stored_total = non_negative_int(result.value.get("total_operations"))
        if stored_total != self._stats.total_operations:
            logger.warning(
                f"Repaired usage stats total: {stored_total} -> {self._stats.total_operations}"
            )
        return LoadStatus.FOUND

    def _persist(self) -> None:
        try:
            self._persistence.save(self._key, self._stats.to_dict())
        except StorageError as e:
            logger.warning(f"Could not persist usage stats: {e}")

    @property
    def stats(self) -> UsageStats:
        """Snapshot of the current record."""
        return self._stats.copy()

    def record_operation(
        self,
        tool_identifier: str,
        file_count: int,
        total_size_bytes: int,
        success: bool,
    ) -> UsageStats:
        """Fold one completed operation into the ledger.

        The next record is built in full before it replaces the current one,
        followed by a single save.

        Args:
            tool_identifier: Tool that ran, e.g. "merge-pdf"
            file_count: Number of input files
            total_size_bytes: Combined input size
            success: Whether the remote operation succeeded

        Returns:
            Snapshot of the updated record
        """
        if file_count < 0 or total_size_bytes < 0:
            raise ValueError("file_count and total_size_bytes must be non-negative")

        now = self._clock()
        today = calendar_day(now)
        prev = self._stats

        counts = dict(prev.tool_usage_counts)
        counts[tool_identifier] = counts.get(tool_identifier, 0) + 1

        self._stats = replace(
            prev,
            total_operations=prev.total_operations + 1,
            successful_operations=prev.successful_operations + (1 if success else 0),
            failed_operations=prev.failed_operations + (0 if success else 1),
            total_files_processed=prev.total_files_processed + file_count,
            total_data_processed_bytes=prev.total_data_processed_bytes + total_size_bytes,
            tool_usage_counts=counts,
            first_used_at=prev.first_used_at or now,
            streak_days=next_streak(prev.streak_days, prev.last_used_date, today),
            last_used_date=today,
        )
        self._persist()
        return self.stats

    def reset_stats(self) -> None:
        """Replace the record with defaults. Only ever called on user request."""
        self._stats = UsageStats()
        self._persist()
        logger.info("Usage stats reset")
