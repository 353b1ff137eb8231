"""Type definitions for vmatch."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, Sequence

from .exceptions import VendorRecordError

_NAME_FIELDS = ("display_name", "displayName", "supplier_name", "name")
_CATEGORY_FIELDS = ("categories", "service_categories")


class TagSource(Enum):
    """Which translation table a tag resolved from."""

    CURRENT = "current"
    LEGACY = "legacy"
    UNKNOWN = "unknown"


class VendorLike(Protocol):
    """Anything the engine can rank: a display name and declared categories."""

    @property
    def display_name(self) -> str: ...

    @property
    def categories(self) -> Sequence[str] | None: ...


@dataclass(frozen=True)
class Vendor:
    """A vendor (supplier) record as seen by the matching engine.

    Attributes:
        id: Stable identifier from the vendor directory.
        display_name: Name shown to users, used for tie-breaking.
        categories: Business categories the vendor declared, in declared order.
        extra: Any other fields of the source record. Never read by the engine.
    """

    id: Any
    display_name: str
    categories: tuple[str, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Vendor":
        """Build a Vendor from a directory record.

        Accepts the field spellings used across the vendor directory and
        keeps unrecognised fields in ``extra``.

        Args:
            record: Mapping with at least an id, a name and categories.

        Returns:
            Vendor instance.

        Raises:
            VendorRecordError: If the id or display name is missing.
        """
        if record.get("id") is None:
            raise VendorRecordError(f"Vendor record has no id: {dict(record)!r}")

        name_key = next((k for k in _NAME_FIELDS if record.get(k) is not None), None)
        if name_key is None:
            raise VendorRecordError(
                f"Vendor record {record['id']!r} has no display name"
            )

        category_key = next(
            (k for k in _CATEGORY_FIELDS if record.get(k) is not None), None
        )
        categories = record.get(category_key) if category_key else None

        used = {"id", name_key, category_key}
        extra = {k: v for k, v in record.items() if k not in used}

        return cls(
            id=record["id"],
            display_name=str(record[name_key]),
            categories=tuple(categories or ()),
            extra=extra,
        )


@dataclass(frozen=True)
class RelevanceResult:
    """Relevance of one vendor to one set of asset tags.

    Attributes:
        score: Number of the vendor's declared categories that matched.
        matching_categories: The matched categories, in the vendor's declared order.
    """

    score: int = 0
    matching_categories: tuple[str, ...] = ()

    @property
    def is_match(self) -> bool:
        """True if at least one declared category matched."""
        return self.score > 0


@dataclass(frozen=True)
class RankedVendor:
    """A vendor paired with the relevance that placed it in the ranking."""

    vendor: Any
    relevance: RelevanceResult
