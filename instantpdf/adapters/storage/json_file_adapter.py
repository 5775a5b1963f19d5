"""
JSON file implementation of PersistencePort.

Keeps one JSON document per key in a storage directory, the local
equivalent of browser key-value storage.
"""
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Optional

from instantpdf.core.exceptions import StorageError
from instantpdf.core.ports.persistence import LoadResult, LoadStatus, PersistencePort

logger = logging.getLogger(__name__)

_VALID_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileAdapter(PersistencePort):
    """File-per-key PersistencePort.

    Writes go to a temporary sibling file first and are then renamed over
    the target, so a crash mid-write never leaves a truncated document.
    """

    def __init__(self, storage_dir: Optional[str] = None):
        """Initialize the adapter.

        Args:
            storage_dir: Directory for ledger documents
                (default: $LEDGER_STORAGE_DIR or ~/.instantpdf)
        """
        self.storage_dir = Path(storage_dir or os.environ.get(
            "LEDGER_STORAGE_DIR",
            Path.home() / ".instantpdf",
        ))

    def _path(self, key: str) -> Path:
        """Build the document path for key."""
        if not _VALID_KEY.match(key) or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.storage_dir / f"{key}.json"

    def load(self, key: str) -> LoadResult:
        path = self._path(key)
        try:
            with open(path, encoding="utf-8") as f:
                return LoadResult(LoadStatus.FOUND, json.load(f))
        except FileNotFoundError:
            return LoadResult.missing()
        except ValueError as e:
            logger.warning(f"Corrupt ledger document {path}: {e}")
            return LoadResult.corrupt(str(e))
        except OSError as e:
            logger.warning(f"Failed to read {path}: {e}")
            return LoadResult.unavailable(str(e))

    def save(self, key: str, value: Any) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(value, f, indent=2)
            os.replace(tmp_path, path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise StorageError(f"Failed to persist {key}: {e}") from e
