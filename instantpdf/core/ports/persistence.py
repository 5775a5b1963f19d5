"""Persistence port interface.

Defines the contract for client-local key-value storage. Ledger stores depend
only on this abstraction, not on a specific medium like JSON files or Redis.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class LoadStatus(Enum):
    """Outcome of reading one key."""
    FOUND = "found"
    MISSING = "missing"
    CORRUPT = "corrupt"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class LoadResult:
    """Value read from storage, or the reason there is none.

    Adapters never raise from load(); a corrupt or unreadable record is
    reported here so callers can fall back to defaults explicitly.
    """
    status: LoadStatus
    value: Any = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is LoadStatus.FOUND

    @classmethod
    def missing(cls) -> "LoadResult":
        return cls(LoadStatus.MISSING)

    @classmethod
    def corrupt(cls, error: str) -> "LoadResult":
        return cls(LoadStatus.CORRUPT, error=error)

    @classmethod
    def unavailable(cls, error: str) -> "LoadResult":
        return cls(LoadStatus.UNAVAILABLE, error=error)


class PersistencePort(ABC):
    """Abstract interface for JSON document persistence by key.

    Implementations: InMemoryAdapter, JsonFileAdapter, RedisAdapter
    """

    @abstractmethod
    def load(self, key: str) -> LoadResult:
        """Read and decode the JSON document stored under key.

        Args:
            key: Storage key

        Returns:
            LoadResult with FOUND and the decoded value, or the failure status
        """
        pass

    @abstractmethod
    def save(self, key: str, value: Any) -> None:
        """Encode value as JSON and store it under key, replacing any prior value.

        Args:
            key: Storage key
            value: JSON-serializable document

        Raises:
            StorageError: If the medium rejects the write
        """
        pass
