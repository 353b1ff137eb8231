"""Asset tag to vendor category translation.

Asset tags are finer grained than the categories vendors declare, and
assets created before the current taxonomy still carry tags from the
retired one. Translation consults the current table first and falls
back to the legacy table per tag.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from loguru import logger

from vmatch.core.exceptions import TaxonomyLoadError
from vmatch.core.types import TagSource

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_TRANSLATION_FILE = DATA_DIR / "tag_categories.json"
DEFAULT_LEGACY_TRANSLATION_FILE = DATA_DIR / "legacy_tag_categories.json"

TranslationTable = Mapping[str, tuple[str, ...]]


def _freeze(table: Mapping[str, Iterable[str]]) -> TranslationTable:
    return MappingProxyType({tag: tuple(categories) for tag, categories in table.items()})


class CategoryTranslator:
    """Resolve asset tags to the vendor categories they imply.

    A tag present in the current table, even with an empty category
    list, never falls through to the legacy table. Tags found in neither
    table resolve to nothing.

    Example:
        translator = CategoryTranslator(
            {"Video & Display": ["Graphics", "Video"]},
            legacy={"LED Screens": ["Graphics", "Video"], "Microphones": ["Audio"]},
        )
        translator.resolve_categories(["Video & Display", "Microphones"])
        # frozenset({"Graphics", "Video", "Audio"})
        translator.resolve_categories(["Permits"])
        # frozenset()
    """

    def __init__(
        self,
        current: Mapping[str, Iterable[str]],
        *,
        legacy: Mapping[str, Iterable[str]] | None = None,
    ):
        """Initialize the translator.

        Args:
            current: Current-taxonomy table, tag -> categories.
            legacy: Retired-taxonomy table consulted when a tag is not in
                the current table.
        """
        self._current = _freeze(current)
        self._legacy = _freeze(legacy or {})

    @property
    def current(self) -> TranslationTable:
        """Read-only current-taxonomy table."""
        return self._current

    @property
    def legacy(self) -> TranslationTable:
        """Read-only legacy table."""
        return self._legacy

    def source_of(self, tag: str) -> TagSource:
        """Report which table a tag resolves from."""
        if tag in self._current:
            return TagSource.CURRENT
        if tag in self._legacy:
            return TagSource.LEGACY
        return TagSource.UNKNOWN

    def is_known(self, tag: str) -> bool:
        """Check whether either table has an entry for a tag."""
        return tag in self._current or tag in self._legacy

    def categories_for(self, tag: str) -> tuple[str, ...]:
        """Categories for a single tag.

        Args:
            tag: Asset tag, current or legacy.

        Returns:
            Categories in table order; empty for unknown tags.
        """
        categories = self._current.get(tag)
        if categories is not None:
            return categories

        categories = self._legacy.get(tag)
        if categories is not None:
            logger.debug(f"Tag {tag!r} resolved through legacy table")
            return categories

        return ()

    def resolve_categories(self, tags: Iterable[str] | None) -> frozenset[str]:
        """Resolve asset tags to the union of their categories.

        Args:
            tags: Asset tags in any order; may be empty, None, or contain
                duplicates and unknown tags.

        Returns:
            Set of categories implied by the tags.
        """
        if not tags:
            return frozenset()

        resolved: set[str] = set()
        for tag in tags:
            resolved.update(self.categories_for(tag))
        return frozenset(resolved)


def _read_table(path: Path) -> dict[str, list[str]]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise TaxonomyLoadError(path, "top level must be an object")

    mappings = data.get("mappings", data)  # Support both wrapped and flat formats
    if not isinstance(mappings, dict):
        raise TaxonomyLoadError(path, "'mappings' must be an object")

    for tag, categories in mappings.items():
        if not isinstance(categories, list) or not all(isinstance(c, str) for c in categories):
            raise TaxonomyLoadError(path, f"categories for {tag!r} must be a list of strings")

    return mappings


def load_translation_table(path: Path | str) -> dict[str, list[str]]:
    """Load a tag -> categories table from a JSON file.

    Expected format:
    {
        "version": 2,
        "mappings": {
            "Audio": ["Audio"],
            "Video & Display": ["Graphics", "Video"],
            "Permits & Licensing": [],
            ...
        }
    }

    A bare object of tag -> categories is accepted as well.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the file is not valid JSON.
        TaxonomyLoadError: If an entry is not a list of strings.
    """
    return _read_table(Path(path))


def load_translator(
    path: Path | str,
    legacy_path: Path | str | None = None,
) -> CategoryTranslator:
    """Build a translator from a current table file and optional legacy file."""
    current = load_translation_table(path)
    legacy: dict[str, Any] = load_translation_table(legacy_path) if legacy_path else {}

    logger.debug(
        f"Loaded translation tables: {len(current)} current, {len(legacy)} legacy tags"
    )
    return CategoryTranslator(current, legacy=legacy)


def load_default_translator() -> CategoryTranslator:
    """Build a translator from the tables shipped with the package."""
    return load_translator(DEFAULT_TRANSLATION_FILE, DEFAULT_LEGACY_TRANSLATION_FILE)


_default_translator: CategoryTranslator | None = None


def get_default_translator() -> CategoryTranslator:
    """Shared translator built from packaged data, loaded on first use."""
    global _default_translator
    if _default_translator is None:
        _default_translator = load_default_translator()
    return _default_translator


def resolve_categories(
    tags: Iterable[str] | None,
    translator: CategoryTranslator | None = None,
) -> frozenset[str]:
    """Resolve asset tags to categories with the given or default translator."""
    return (translator or get_default_translator()).resolve_categories(tags)
