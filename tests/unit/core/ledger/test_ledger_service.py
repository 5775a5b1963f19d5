"""Tests for LedgerService wiring of the four stores."""
import json
from datetime import datetime
from pathlib import Path

from instantpdf.adapters.storage.json_file_adapter import JsonFileAdapter
from instantpdf.adapters.storage.memory_adapter import InMemoryAdapter
from instantpdf.config.ledger_limits import (
    FAVORITES_KEY,
    HISTORY_KEY,
    RECENT_FILES_KEY,
    USAGE_STATS_KEY,
)
from instantpdf.core.ledger.service import LedgerService
from instantpdf.core.models.log_entry import Outcome
from instantpdf.core.ports.persistence import LoadStatus


def _clock():
    return datetime(2025, 5, 5, 8, 0)


class TestLedgerService:
    def test_fresh_profile(self):
        ledger = LedgerService(InMemoryAdapter(), clock=_clock)
        assert ledger.stats.total_operations == 0
        assert ledger.history == []
        assert ledger.recent_files == []
        assert ledger.favorites == []
        assert set(ledger.load_outcomes().values()) == {LoadStatus.MISSING}

    def test_each_store_writes_its_own_key(self):
        storage = InMemoryAdapter()
        ledger = LedgerService(storage, clock=_clock)

        ledger.record_operation("merge-pdf", 2, 2048, True)
        ledger.add_to_history("a.pdf", "merge-pdf", "Merge PDF", 2048, Outcome.SUCCESS)
        ledger.add_recent_file("a.pdf", "merge-pdf", "Merge PDF", 2048)
        ledger.toggle_favorite("merge-pdf")

        assert json.loads(storage.raw(USAGE_STATS_KEY))["total_operations"] == 1
        assert len(json.loads(storage.raw(HISTORY_KEY))) == 1
        assert len(json.loads(storage.raw(RECENT_FILES_KEY))) == 1
        assert json.loads(storage.raw(FAVORITES_KEY)) == ["merge-pdf"]

    def test_state_survives_restart(self):
        storage = InMemoryAdapter()
        ledger = LedgerService(storage, clock=_clock)
        ledger.record_operation("split-pdf", 1, 10, False)
        ledger.toggle_favorite("split-pdf")

        restarted = LedgerService(storage, clock=_clock)

        assert restarted.stats.failed_operations == 1
        assert restarted.is_favorite("split-pdf")

    def test_one_corrupt_store_does_not_affect_others(self):
        storage = InMemoryAdapter({
            HISTORY_KEY: "garbage",
            FAVORITES_KEY: '["merge-pdf"]',
        })
        ledger = LedgerService(storage, clock=_clock)
        outcomes = ledger.load_outcomes()
        assert outcomes["history"] is LoadStatus.CORRUPT
        assert outcomes["favorites"] is LoadStatus.FOUND
        assert ledger.favorites == ["merge-pdf"]

    def test_summary_and_reset(self):
        ledger = LedgerService(InMemoryAdapter(), clock=_clock)
        ledger.record_operation("merge-pdf", 1, 100, True)
        ledger.record_operation("merge-pdf", 1, 100, False)
        assert ledger.summary().success_rate == 50
        ledger.reset_stats()
        assert ledger.summary().is_empty

    def test_remove_and_clear_delegate(self):
        ledger = LedgerService(InMemoryAdapter(), clock=_clock)
        item = ledger.add_to_history("a.pdf", "merge-pdf", "Merge PDF", 1, Outcome.FAILED)
        ledger.remove_from_history(item.id)
        assert ledger.history == []
        recent = ledger.add_recent_file("a.pdf", "merge-pdf", "Merge PDF", 1)
        ledger.remove_recent_file(recent.id)
        ledger.add_recent_file("b.pdf", "merge-pdf", "Merge PDF", 1)
        ledger.clear_recent_files()
        ledger.add_to_history("c.pdf", "merge-pdf", "Merge PDF", 1, Outcome.SUCCESS)
        ledger.clear_history()
        assert ledger.recent_files == []
        assert ledger.history == []

    def test_unusable_storage_dir_keeps_ledger_in_memory(self, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("")
        ledger = LedgerService(JsonFileAdapter(str(blocker / "sub")), clock=_clock)

        assert set(ledger.load_outcomes().values()) == {LoadStatus.UNAVAILABLE}
        ledger.record_operation("merge-pdf", 1, 10, True)
        ledger.toggle_favorite("merge-pdf")
        assert ledger.stats.total_operations == 1
        assert ledger.favorites == ["merge-pdf"]
