"""In-memory implementation of PersistencePort.

Holds encoded JSON strings so values round-trip exactly like a real medium.
Used by tests and by the API when LEDGER_BACKEND=memory.
"""
import json
from typing import Any, Dict, Optional

from instantpdf.core.exceptions import StorageError
from instantpdf.core.ports.persistence import LoadResult, LoadStatus, PersistencePort


class InMemoryAdapter(PersistencePort):
    """Dictionary-backed PersistencePort.

    Args:
        initial: Optional raw strings keyed by storage key, e.g. to seed
            a corrupt record in tests
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> LoadResult:
        raw = self._data.get(key)
        if raw is None:
            return LoadResult.missing()
        try:
            return LoadResult(LoadStatus.FOUND, json.loads(raw))
        except ValueError as e:
            return LoadResult.corrupt(str(e))

    def save(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Cannot encode value for {key}: {e}") from e

    def raw(self, key: str):
        """Return the stored JSON string for key (None if absent)."""
        return self._data.get(key)
