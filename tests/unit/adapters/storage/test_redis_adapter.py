"""Tests for RedisAdapter implementing PersistencePort."""
import json
from unittest.mock import MagicMock

import pytest
import redis

from instantpdf.adapters.storage.redis_adapter import RedisAdapter
from instantpdf.core.exceptions import StorageError
from instantpdf.core.ports.persistence import LoadStatus, PersistencePort


class TestRedisAdapter:
    """Test RedisAdapter implements PersistencePort correctly."""

    def test_implements_persistence_port(self):
        adapter = RedisAdapter(MagicMock())
        assert isinstance(adapter, PersistencePort)

    def test_save_encodes_json_under_prefixed_key(self):
        mock_redis = MagicMock()
        adapter = RedisAdapter(mock_redis)

        adapter.save("instantpdf_favorites", ["merge-pdf"])

        mock_redis.set.assert_called_once()
        key, payload = mock_redis.set.call_args[0]
        assert key == "ledger:instantpdf_favorites"
        assert json.loads(payload) == ["merge-pdf"]
        assert mock_redis.set.call_args.kwargs["ex"] is None

    def test_save_with_ttl(self):
        mock_redis = MagicMock()
        RedisAdapter(mock_redis, ttl_seconds=60).save("k", {})
        assert mock_redis.set.call_args.kwargs["ex"] == 60

    def test_load_returns_data(self):
        mock_redis = MagicMock()
        mock_redis.get = MagicMock(return_value=b'{"streak_days": 3}')
        result = RedisAdapter(mock_redis).load("instantpdf_usage_stats")
        assert result.status is LoadStatus.FOUND
        assert result.value == {"streak_days": 3}

    def test_load_missing(self):
        mock_redis = MagicMock()
        mock_redis.get = MagicMock(return_value=None)
        assert RedisAdapter(mock_redis).load("k").status is LoadStatus.MISSING

    def test_load_corrupt(self):
        mock_redis = MagicMock()
        mock_redis.get = MagicMock(return_value=b"{oops")
        assert RedisAdapter(mock_redis).load("k").status is LoadStatus.CORRUPT

    def test_load_connection_error_is_unavailable(self):
        mock_redis = MagicMock()
        mock_redis.get.side_effect = redis.ConnectionError("refused")
        result = RedisAdapter(mock_redis).load("k")
        assert result.status is LoadStatus.UNAVAILABLE
        assert "refused" in result.error

    def test_save_failure_raises_storage_error(self):
        mock_redis = MagicMock()
        mock_redis.set.side_effect = redis.ConnectionError("refused")
        with pytest.raises(StorageError):
            RedisAdapter(mock_redis).save("k", [])
