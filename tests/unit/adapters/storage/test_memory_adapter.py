"""Tests for InMemoryAdapter."""
import pytest

from instantpdf.adapters.storage.memory_adapter import InMemoryAdapter
from instantpdf.core.exceptions import StorageError
from instantpdf.core.ports.persistence import LoadStatus


class TestInMemoryAdapter:
    def test_round_trip_through_json(self):
        adapter = InMemoryAdapter()
        adapter.save("k", {"a": [1, 2]})
        assert adapter.raw("k") == '{"a": [1, 2]}'
        assert adapter.load("k").value == {"a": [1, 2]}

    def test_seeded_corrupt_value(self):
        adapter = InMemoryAdapter({"k": "not json"})
        assert adapter.load("k").status is LoadStatus.CORRUPT

    def test_missing(self):
        assert InMemoryAdapter().load("k").status is LoadStatus.MISSING

    def test_unserializable(self):
        with pytest.raises(StorageError):
            InMemoryAdapter().save("k", {1, 2})
