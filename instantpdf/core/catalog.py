"""
ToolCatalog - display names and ordering of the PDF tools.

Loads config/tools.yaml, an ordered list of {id, name} entries. Used to label
history entries and to sort favorites and usage summaries in catalog order.
"""
import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)


class ToolCatalog:
    """Tool identifiers in display order with their names."""

    _instance: Optional["ToolCatalog"] = None

    def __init__(self, catalog_path: Optional[Path] = None):
        """Initialize catalog.

        Args:
            catalog_path: Path to the catalog YAML.
                          Defaults to instantpdf/config/tools.yaml
        """
        if catalog_path is None:
            catalog_path = Path(__file__).parents[1] / "config" / "tools.yaml"
        self._catalog_path = Path(catalog_path)
        self._names: Dict[str, str] = {}
        self._order: Dict[str, int] = {}
        self._load()

    @classmethod
    def get_instance(cls) -> "ToolCatalog":
        """Get singleton instance for shared access."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton (for testing)."""
        cls._instance = None

    def _load(self) -> None:
        if not self._catalog_path.exists():
            logger.warning(f"Tool catalog not found: {self._catalog_path}")
            return
        with open(self._catalog_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        for tool in data.get("tools", []):
            tool_id = tool.get("id")
            if not tool_id or tool_id in self._order:
                continue
            self._order[tool_id] = len(self._order)
            self._names[tool_id] = tool.get("name") or tool_id

    @property
    def tool_ids(self) -> List[str]:
        return list(self._order)

    def __contains__(self, tool_id: str) -> bool:
        return tool_id in self._order

    def __len__(self) -> int:
        return len(self._order)

    def display_name(self, tool_id: str) -> str:
        """Human-readable tool name; the identifier itself if unknown."""
        return self._names.get(tool_id, tool_id)

    def order_of(self, tool_id: str) -> int:
        """Catalog position; unknown tools sort after every known one."""
        return self._order.get(tool_id, len(self._order))
