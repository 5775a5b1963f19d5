"""
Log entry models for the bounded log stores.

HistoryItem records an operation outcome; RecentFile is a reopen shortcut.
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from instantpdf.core.models._coerce import non_negative_int, parse_timestamp


class Outcome(Enum):
    """Result of a remote operation."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class LogEntry:
    """Fields shared by every bounded-log entry."""

    id: str
    display_name: str
    tool_identifier: str
    tool_display_name: str
    size_bytes: int
    created_at: datetime

    @property
    def dedup_key(self) -> Tuple[str, str]:
        return (self.display_name, self.tool_identifier)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        return data

    @classmethod
    def _common_fields(cls, data: Any) -> Optional[Dict[str, Any]]:
        """Read the shared fields, or None if the record is unusable."""
        if not isinstance(data, dict):
            return None
        entry_id = data.get("id")
        created_at = parse_timestamp(data.get("created_at"))
        if not isinstance(entry_id, str) or not entry_id or created_at is None:
            return None
        tool_identifier = data.get("tool_identifier")
        if not isinstance(tool_identifier, str):
            return None
        display_name = data.get("display_name")
        tool_display_name = data.get("tool_display_name")
        return {
            "id": entry_id,
            "display_name": display_name if isinstance(display_name, str) else "",
            "tool_identifier": tool_identifier,
            "tool_display_name": (
                tool_display_name if isinstance(tool_display_name, str) else tool_identifier
            ),
            "size_bytes": non_negative_int(data.get("size_bytes")),
            "created_at": created_at,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Optional["LogEntry"]:
        fields = cls._common_fields(data)
        return cls(**fields) if fields else None


@dataclass(frozen=True)
class RecentFile(LogEntry):
    """A recently processed file the user can reopen."""
    pass


@dataclass(frozen=True)
class HistoryItem(LogEntry):
    """Outcome of one processed operation."""

    outcome: Outcome = Outcome.SUCCESS
    operation: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["outcome"] = self.outcome.value
        return data

    @classmethod
    def from_dict(cls, data: Any) -> Optional["HistoryItem"]:
        fields = cls._common_fields(data)
        if fields is None:
            return None
        try:
            outcome = Outcome(data.get("outcome"))
        except ValueError:
            return None
        operation = data.get("operation")
        return cls(
            **fields,
            outcome=outcome,
            operation=operation if isinstance(operation, str) else "",
        )
