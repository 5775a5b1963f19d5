"""Tests for UsageStats serialization and lenient merge."""
import sys
from datetime import datetime

import pytest

from instantpdf.core.models.usage import UsageStats


class TestUsageStatsFromDict:
    def test_defaults(self):
        stats = UsageStats()
        assert stats.total_operations == 0
        assert stats.streak_days == 0
        assert stats.first_used_at is None
        assert stats.is_consistent

    def test_unknown_keys_ignored(self):
        stats = UsageStats.from_dict({"successful_operations": 1, "theme": "dark"})
        assert stats.successful_operations == 1
        assert stats.total_operations == 1

    def test_ill_typed_fields_take_defaults(self):
        stats = UsageStats.from_dict({
            "successful_operations": "many",
            "failed_operations": -2,
            "total_files_processed": True,
            "tool_usage_counts": ["merge-pdf"],
            "first_used_at": {"when": "now"},
            "last_used_date": "yesterday",
        })
        assert stats == UsageStats()

    def test_epoch_millis_first_used(self):
        stats = UsageStats.from_dict({"first_used_at": 1700000000000})
        assert stats.first_used_at == datetime.fromtimestamp(1700000000)

    def test_non_dict_gives_defaults(self):
        assert UsageStats.from_dict(None) == UsageStats()

    def test_to_dict_round_trip(self):
        stats = UsageStats(
            total_operations=2,
            successful_operations=1,
            failed_operations=1,
            tool_usage_counts={"merge-pdf": 2},
            first_used_at=datetime(2025, 1, 1, 10, 0, 0, 123456),
            streak_days=1,
            last_used_date="2025-01-01",
        )
        assert UsageStats.from_dict(stats.to_dict()) == stats
        assert stats.to_dict()["first_used_at"] == "2025-01-01T10:00:00.123456"


class TestLastUsedDate:
    def test_canonical_date_kept(self):
        stats = UsageStats.from_dict({"last_used_date": "2025-04-01"})
        assert stats.last_used_date == "2025-04-01"

    @pytest.mark.skipif(sys.version_info < (3, 11), reason="basic ISO dates parse on 3.11+")
    def test_basic_iso_date_normalized(self):
        stats = UsageStats.from_dict({"last_used_date": "20250401"})
        assert stats.last_used_date == "2025-04-01"
