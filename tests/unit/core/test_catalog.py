"""Tests for the YAML tool catalog."""
from pathlib import Path

import pytest

from instantpdf.core.catalog import ToolCatalog


@pytest.fixture(autouse=True)
def reset_singleton():
    ToolCatalog.reset_instance()
    yield
    ToolCatalog.reset_instance()


class TestToolCatalog:
    def test_bundled_catalog_loads(self):
        catalog = ToolCatalog()
        assert "merge-pdf" in catalog
        assert catalog.display_name("merge-pdf") == "Merge PDF"
        assert catalog.order_of("merge-pdf") == 0

    def test_unknown_tool(self):
        catalog = ToolCatalog()
        assert catalog.display_name("made-up") == "made-up"
        assert catalog.order_of("made-up") == len(catalog)

    def test_missing_file_gives_empty_catalog(self, tmp_path: Path):
        catalog = ToolCatalog(tmp_path / "absent.yaml")
        assert len(catalog) == 0
        assert catalog.display_name("merge-pdf") == "merge-pdf"

    def test_duplicates_and_missing_names(self, tmp_path: Path):
        path = tmp_path / "tools.yaml"
        path.write_text("tools:\n  - id: a\n  - id: b\n    name: Bee\n  - id: a\n    name: Again\n")
        catalog = ToolCatalog(path)
        assert catalog.tool_ids == ["a", "b"]
        assert catalog.display_name("a") == "a"
        assert catalog.display_name("b") == "Bee"

    def test_singleton(self):
        assert ToolCatalog.get_instance() is ToolCatalog.get_instance()
