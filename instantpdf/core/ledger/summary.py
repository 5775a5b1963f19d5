"""Derived usage figures for dashboards."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from instantpdf.config.ledger_limits import TOP_TOOLS_COUNT
from instantpdf.core.models.usage import UsageStats


def format_bytes(num_bytes: int) -> str:
    """Human-readable size: B, KB and MB with one decimal, GB with two."""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 ** 2:
        return f"{num_bytes / 1024:.1f} KB"
    if num_bytes < 1024 ** 3:
        return f"{num_bytes / 1024 ** 2:.1f} MB"
    return f"{num_bytes / 1024 ** 3:.2f} GB"


def success_rate(stats: UsageStats) -> int:
    """Successful operations as a rounded percentage (0 with no operations)."""
    if stats.total_operations == 0:
        return 0
    return int(stats.successful_operations * 100 / stats.total_operations + 0.5)


def top_tools(stats: UsageStats, limit: int = TOP_TOOLS_COUNT) -> List[Tuple[str, int]]:
    """Most-used tools, highest count first; ties keep first-seen order."""
    ranked = sorted(stats.tool_usage_counts.items(), key=lambda item: -item[1])
    return ranked[:limit]


@dataclass
class LedgerSummary:
    """Dashboard view of UsageStats."""

    total_operations: int
    successful_operations: int
    failed_operations: int
    total_files_processed: int
    data_processed: str
    success_rate: int
    streak_days: int
    member_since: Optional[datetime] = None
    top_tools: List[Tuple[str, int]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.total_operations == 0

    @classmethod
    def from_stats(cls, stats: UsageStats, top_limit: int = TOP_TOOLS_COUNT) -> "LedgerSummary":
        return cls(
            total_operations=stats.total_operations,
            successful_operations=stats.successful_operations,
            failed_operations=stats.failed_operations,
            total_files_processed=stats.total_files_processed,
            data_processed=format_bytes(stats.total_data_processed_bytes),
            success_rate=success_rate(stats),
            streak_days=stats.streak_days,
            member_since=stats.first_used_at,
            top_tools=top_tools(stats, top_limit),
        )
