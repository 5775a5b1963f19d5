"""Favorites set of pinned tool identifiers."""
import logging
from typing import List, Optional

from instantpdf.config.ledger_limits import FAVORITES_KEY
from instantpdf.core.catalog import ToolCatalog
from instantpdf.core.exceptions import StorageError
from instantpdf.core.ports.persistence import LoadStatus, PersistencePort

logger = logging.getLogger(__name__)


class FavoritesSet:
    """Persisted set of tool identifiers with toggle semantics.

    Stored as a list in pin order; no capacity bound.
    """

    def __init__(self, persistence: PersistencePort, key: str = FAVORITES_KEY):
        self._persistence = persistence
        self._key = key
        self._items: List[str] = []
        self.load_outcome = self._load()

    def _load(self) -> LoadStatus:
        result = self._persistence.load(self._key)
        if not result.found:
            if result.status is not LoadStatus.MISSING:
                logger.warning(f"Starting favorites empty ({result.status.value}): {result.error}")
            return result.status
        if not isinstance(result.value, list):
            logger.warning("Starting favorites empty: expected a list")
            return LoadStatus.CORRUPT
        for item in result.value:
            if isinstance(item, str) and item not in self._items:
                self._items.append(item)
        return LoadStatus.FOUND

    @property
    def favorites(self) -> List[str]:
        return list(self._items)

    def is_favorite(self, tool_identifier: str) -> bool:
        return tool_identifier in self._items

    def toggle_favorite(self, tool_identifier: str) -> bool:
        """Pin or unpin a tool.

        Returns:
            True if the tool is a favorite afterwards
        """
        if tool_identifier in self._items:
            self._items = [t for t in self._items if t != tool_identifier]
        else:
            self._items = [*self._items, tool_identifier]
        try:
            self._persistence.save(self._key, self._items)
        except StorageError as e:
            logger.warning(f"Could not persist favorites: {e}")
        return self.is_favorite(tool_identifier)

    def ordered(self, catalog: Optional[ToolCatalog] = None) -> List[str]:
        """Favorites in catalog order; tools unknown to the catalog go last."""
        if catalog is None:
            return self.favorites
        return sorted(self._items, key=catalog.order_of)
