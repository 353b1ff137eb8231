"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from vmatch.core.types import Vendor
from vmatch.matching.translator import CategoryTranslator
from vmatch.taxonomy.model import AssetTag, CategoryVocabulary, TagTaxonomy


# Small tables shaped like the packaged data
CURRENT_TABLE = {
    "Audio": ["Audio"],
    "Video & Display": ["Graphics", "Video"],
    "Catering": ["Catering", "Food"],
    "Floral & Decor": ["Design"],
    "Permits & Licensing": [],
}

LEGACY_TABLE = {
    "Microphones": ["Audio"],
    "LED Screens": ["Graphics", "Video"],
    "Print Materials": ["Printing", "Graphics"],
    "Floral": [],
    # Retired tag reused by the current taxonomy with a different meaning
    "Catering": ["Beverages"],
}

CATEGORIES = ["Printing", "Graphics", "Audio", "Video", "Catering", "Food", "Design", "Beverages"]


@pytest.fixture
def translator() -> CategoryTranslator:
    """Provide a translator over the small test tables."""
    return CategoryTranslator(CURRENT_TABLE, legacy=LEGACY_TABLE)


@pytest.fixture
def taxonomy() -> TagTaxonomy:
    """Provide a taxonomy matching the current test table."""
    return TagTaxonomy(AssetTag(name) for name in CURRENT_TABLE)


@pytest.fixture
def vocabulary() -> CategoryVocabulary:
    """Provide a category vocabulary covering the test tables."""
    return CategoryVocabulary(CATEGORIES)


@pytest.fixture
def make_vendor():
    """Factory for vendors with an id derived from the name."""

    def _make(name: str, categories=(), vendor_id=None) -> Vendor:
        return Vendor(
            id=vendor_id if vendor_id is not None else f"id-{name}",
            display_name=name,
            categories=tuple(categories),
        )

    return _make


@pytest.fixture
def data_files(tmp_path: Path) -> dict[str, Path]:
    """Write taxonomy and translation files matching the test tables."""
    taxonomy_path = tmp_path / "taxonomy.json"
    taxonomy_path.write_text(
        json.dumps({
            "version": 7,
            "tags": [{"name": name, "color": "#000000"} for name in CURRENT_TABLE],
            "categories": CATEGORIES,
            "category_groups": {"Media": ["Video"]},
        }),
        encoding="utf-8",
    )

    current_path = tmp_path / "current.json"
    current_path.write_text(json.dumps({"mappings": CURRENT_TABLE}), encoding="utf-8")

    legacy_path = tmp_path / "legacy.json"
    legacy_path.write_text(json.dumps({"mappings": LEGACY_TABLE}), encoding="utf-8")

    return {"taxonomy": taxonomy_path, "current": current_path, "legacy": legacy_path}
