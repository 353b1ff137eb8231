"""Asset tag taxonomy and vendor category vocabulary.

The canonical tag list and the category vocabulary live in one data file
so that every consumer (translation tables, consistency checks, tag
pickers) reads the same taxonomy.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from vmatch.core.exceptions import TaxonomyLoadError

DEFAULT_TAG_COLOR = "#6B7280"

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_TAXONOMY_FILE = DATA_DIR / "tag_taxonomy.json"


@dataclass(frozen=True)
class AssetTag:
    """A canonical tag that can be attached to an asset.

    Attributes:
        name: Canonical tag name (e.g., "Floral & Decor").
        color: Display color as a hex string.
        description: Human-readable description of what the tag covers.
        group: Heading the tag is listed under in tag pickers.
    """

    name: str
    color: str = DEFAULT_TAG_COLOR
    description: str = ""
    group: str = ""


class TagTaxonomy:
    """Ordered, read-only list of canonical asset tags.

    Name lookups are case-insensitive; the stored names keep their
    canonical spelling. Retired tags passed as ``legacy`` are not part of
    the taxonomy, but ``get`` and ``color_for`` still describe them so that
    assets tagged before a taxonomy change keep their display metadata.

    Example:
        taxonomy = TagTaxonomy([AssetTag("Audio"), AssetTag("Lighting")])
        taxonomy.names()          # ("Audio", "Lighting")
        taxonomy.get("audio")     # AssetTag(name="Audio", ...)
        taxonomy.search("light")  # [AssetTag(name="Lighting", ...)]
    """

    def __init__(
        self,
        tags: Iterable[AssetTag],
        *,
        legacy: Iterable[AssetTag] = (),
        version: int | None = None,
    ):
        self._tags: tuple[AssetTag, ...] = tuple(tags)
        self._by_key: dict[str, AssetTag] = {}
        for tag in self._tags:
            self._by_key.setdefault(tag.name.lower(), tag)

        # Current tags shadow retired tags of the same name
        self._legacy: tuple[AssetTag, ...] = tuple(
            tag for tag in legacy if tag.name.lower() not in self._by_key
        )
        self._legacy_by_key: dict[str, AssetTag] = {}
        for tag in self._legacy:
            self._legacy_by_key.setdefault(tag.name.lower(), tag)
        self.version = version

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self):
        return iter(self._tags)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_predefined(name)

    @property
    def tags(self) -> tuple[AssetTag, ...]:
        """All tags in canonical order."""
        return self._tags

    @property
    def legacy_tags(self) -> tuple[AssetTag, ...]:
        """Retired tags kept for display, excluding names still current."""
        return self._legacy

    def names(self) -> tuple[str, ...]:
        """Canonical tag names in taxonomy order."""
        return tuple(tag.name for tag in self._tags)

    def get(self, name: str) -> AssetTag | None:
        """Look up a tag by name, ignoring case.

        Falls back to retired tags, so the result may be a tag that
        ``is_predefined`` rejects.

        Args:
            name: Tag name.

        Returns:
            The tag, or None if it is neither current nor retired.
        """
        key = name.lower()
        return self._by_key.get(key) or self._legacy_by_key.get(key)

    def is_predefined(self, name: str) -> bool:
        """Check whether a name is a canonical tag, ignoring case."""
        return name.lower() in self._by_key

    def is_legacy(self, name: str) -> bool:
        """Check whether a name is a retired tag that is no longer current."""
        return name.lower() in self._legacy_by_key

    def color_for(self, name: str) -> str:
        """Display color for a current or retired tag; gray for anything else."""
        tag = self.get(name)
        return tag.color if tag else DEFAULT_TAG_COLOR

    def with_colors(self, names: Iterable[str]) -> list[dict[str, str]]:
        """Pair each name with its display color, preserving order."""
        return [{"name": name, "color": self.color_for(name)} for name in names]

    def search(self, term: str) -> list[AssetTag]:
        """Find tags whose name or description contains a term.

        Args:
            term: Case-insensitive search term. Blank returns every tag.

        Returns:
            Matching tags in taxonomy order.
        """
        if not term.strip():
            return list(self._tags)

        needle = term.lower()
        return [
            tag
            for tag in self._tags
            if needle in tag.name.lower() or needle in tag.description.lower()
        ]

    def groups(self) -> dict[str, list[AssetTag]]:
        """Tags keyed by group, in first-seen group order."""
        grouped: dict[str, list[AssetTag]] = {}
        for tag in self._tags:
            grouped.setdefault(tag.group, []).append(tag)
        return grouped

    @staticmethod
    def sort_names(names: Iterable[str]) -> list[str]:
        """Sort tag names alphabetically, ignoring case."""
        return sorted(names, key=lambda name: (name.lower(), name))


class CategoryVocabulary:
    """The business categories a vendor can declare, with display groups.

    Example:
        vocab = CategoryVocabulary(
            ["Audio", "Video"], groups={"Media": ["Video"], "Production": ["Audio"]}
        )
        vocab.group_of("Video")       # "Media"
        vocab.grouped(["Audio"])      # {"Production": ["Audio"]}
    """

    def __init__(
        self,
        categories: Iterable[str],
        *,
        groups: Mapping[str, Iterable[str]] | None = None,
    ):
        self._categories: tuple[str, ...] = tuple(dict.fromkeys(categories))
        self._members = frozenset(self._categories)
        self._groups = MappingProxyType(
            {name: tuple(members) for name, members in (groups or {}).items()}
        )

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self):
        return iter(self._categories)

    def __contains__(self, category: object) -> bool:
        return category in self._members

    @property
    def categories(self) -> tuple[str, ...]:
        """All categories in declared order."""
        return self._categories

    @property
    def groups(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only mapping of group name to member categories."""
        return self._groups

    def group_of(self, category: str) -> str | None:
        """Name of the first group listing a category, or None."""
        for name, members in self._groups.items():
            if category in members:
                return name
        return None

    def grouped(self, available: Iterable[str] | None = None) -> dict[str, list[str]]:
        """Groups restricted to the available categories.

        Args:
            available: Categories to keep (e.g. those some vendor declares).
                None keeps the whole vocabulary.

        Returns:
            Group name to categories, with empty groups dropped.
        """
        keep = self._members if available is None else frozenset(available)
        result: dict[str, list[str]] = {}
        for name, members in self._groups.items():
            present = [category for category in members if category in keep]
            if present:
                result[name] = present
        return result


def _parse_tag(path: Path, entry: Any) -> AssetTag:
    if isinstance(entry, str):
        return AssetTag(name=entry)
    if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
        raise TaxonomyLoadError(path, f"tag entry needs a name: {entry!r}")
    return AssetTag(
        name=entry["name"],
        color=entry.get("color", DEFAULT_TAG_COLOR),
        description=entry.get("description", ""),
        group=entry.get("group", ""),
    )


def _read_json(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise TaxonomyLoadError(path, "top level must be an object")
    return data


def load_taxonomy(path: Path | str) -> TagTaxonomy:
    """Load the tag taxonomy from a JSON file.

    Expected format:
    {
        "version": 2,
        "tags": [
            {"name": "Audio", "color": "#8B5CF6", "description": "...", "group": "..."},
            "Lighting",
            ...
        ],
        "legacy_tags": [
            {"name": "Microphones", "color": "#A855F7", ...},
            ...
        ]
    }

    "legacy_tags" is optional and holds retired tags kept for display.

    Args:
        path: Path to the taxonomy JSON file.

    Returns:
        Loaded TagTaxonomy.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the file is not valid JSON.
        TaxonomyLoadError: If the tag list is missing or malformed.
    """
    path = Path(path)
    data = _read_json(path)

    entries = data.get("tags")
    if not isinstance(entries, list):
        raise TaxonomyLoadError(path, "missing 'tags' list")

    legacy = data.get("legacy_tags", [])
    if not isinstance(legacy, list):
        raise TaxonomyLoadError(path, "'legacy_tags' must be a list")

    return TagTaxonomy(
        [_parse_tag(path, entry) for entry in entries],
        legacy=[_parse_tag(path, entry) for entry in legacy],
        version=data.get("version"),
    )


def load_vocabulary(path: Path | str) -> CategoryVocabulary:
    """Load the category vocabulary from a JSON file.

    Reads the "categories" list and optional "category_groups" object
    from the same file as the taxonomy.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the file is not valid JSON.
        TaxonomyLoadError: If the category list is missing or malformed.
    """
    path = Path(path)
    data = _read_json(path)

    categories = data.get("categories")
    if not isinstance(categories, list) or not all(isinstance(c, str) for c in categories):
        raise TaxonomyLoadError(path, "missing 'categories' list of strings")

    groups = data.get("category_groups", {})
    if not isinstance(groups, dict):
        raise TaxonomyLoadError(path, "'category_groups' must be an object")

    return CategoryVocabulary(categories, groups=groups)


def load_default_taxonomy() -> TagTaxonomy:
    """Load the tag taxonomy shipped with the package."""
    return load_taxonomy(DEFAULT_TAXONOMY_FILE)


def load_default_vocabulary() -> CategoryVocabulary:
    """Load the category vocabulary shipped with the package."""
    return load_vocabulary(DEFAULT_TAXONOMY_FILE)
