"""
Usage statistics record.

One record per profile, persisted as a single JSON document.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Optional

from instantpdf.core.models._coerce import (
    non_negative_int,
    parse_calendar_date,
    parse_timestamp,
)


@dataclass(frozen=True)
class UsageStats:
    """Aggregate counters, per-tool frequency and day streak.

    Invariant: total_operations == successful_operations + failed_operations.
    """

    total_operations: int = 0
    successful_operations: int = 0
    failed_operations: int = 0
    total_files_processed: int = 0
    total_data_processed_bytes: int = 0
    tool_usage_counts: Dict[str, int] = field(default_factory=dict)
    first_used_at: Optional[datetime] = None
    streak_days: int = 0
    last_used_date: Optional[str] = None  # YYYY-MM-DD, local time

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_operations": self.total_operations,
            "successful_operations": self.successful_operations,
            "failed_operations": self.failed_operations,
            "total_files_processed": self.total_files_processed,
            "total_data_processed_bytes": self.total_data_processed_bytes,
            "tool_usage_counts": dict(self.tool_usage_counts),
            "first_used_at": self.first_used_at.isoformat() if self.first_used_at else None,
            "streak_days": self.streak_days,
            "last_used_date": self.last_used_date,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "UsageStats":
        """Merge a persisted record over the defaults.

        Unknown keys are ignored and missing or ill-typed fields keep their
        default, so records written by older or newer versions still load.
        A record whose counters disagree is repaired by recomputing the total.
        """
        if not isinstance(data, dict):
            return cls()

        counts = data.get("tool_usage_counts")
        tool_usage_counts = {}
        if isinstance(counts, dict):
            for tool, count in counts.items():
                if isinstance(tool, str):
                    tool_usage_counts[tool] = non_negative_int(count)

        successful = non_negative_int(data.get("successful_operations"))
        failed = non_negative_int(data.get("failed_operations"))

        return cls(
            total_operations=successful + failed,
            successful_operations=successful,
            failed_operations=failed,
            total_files_processed=non_negative_int(data.get("total_files_processed")),
            total_data_processed_bytes=non_negative_int(data.get("total_data_processed_bytes")),
            tool_usage_counts=tool_usage_counts,
            first_used_at=parse_timestamp(data.get("first_used_at")),
            streak_days=non_negative_int(data.get("streak_days")),
            last_used_date=parse_calendar_date(data.get("last_used_date")),
        )

    @property
    def is_consistent(self) -> bool:
        return self.total_operations == self.successful_operations + self.failed_operations

    def copy(self) -> "UsageStats":
        """Return a copy whose tool_usage_counts can be mutated freely."""
        return replace(self, tool_usage_counts=dict(self.tool_usage_counts))
