"""Redis implementation of PersistencePort.

Provides ledger persistence using Redis as the backing store, for shells
that already run a local Redis.
"""
import json
from typing import Any, Optional

import redis

from instantpdf.core.exceptions import StorageError
from instantpdf.core.ports.persistence import LoadResult, LoadStatus, PersistencePort


class RedisAdapter(PersistencePort):
    """Redis implementation of PersistencePort.

    Args:
        redis_client: Configured redis.Redis instance
        key_prefix: Prefix for all ledger keys (default: "ledger:")
        ttl_seconds: Optional time-to-live; ledger data never expires by default
    """

    def __init__(
        self,
        redis_client,
        key_prefix: str = "ledger:",
        ttl_seconds: Optional[int] = None,
    ):
        self._redis = redis_client
        self._prefix = key_prefix
        self._ttl = ttl_seconds

    def _key(self, key: str) -> str:
        """Build Redis key."""
        return f"{self._prefix}{key}"

    def load(self, key: str) -> LoadResult:
        """Read and decode a document from Redis."""
        try:
            raw = self._redis.get(self._key(key))
        except redis.RedisError as e:
            return LoadResult.unavailable(str(e))
        if raw is None:
            return LoadResult.missing()
        try:
            return LoadResult(LoadStatus.FOUND, json.loads(raw))
        except ValueError as e:
            return LoadResult.corrupt(str(e))

    def save(self, key: str, value: Any) -> None:
        """Encode and store a document in Redis."""
        try:
            self._redis.set(self._key(key), json.dumps(value), ex=self._ttl)
        except (redis.RedisError, TypeError, ValueError) as e:
            raise StorageError(f"Failed to persist {key}: {e}") from e
