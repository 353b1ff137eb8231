"""Explain why a vendor was recommended for an asset."""

from __future__ import annotations

from typing import Collection, Iterable, Sequence

from vmatch.core.types import RelevanceResult, VendorLike
from vmatch.matching.scoring import score_vendor
from vmatch.matching.translator import CategoryTranslator, resolve_categories


def filter_matching(vendor: VendorLike, relevant_categories: Collection[str]) -> list[str]:
    """Declared categories of a vendor that are in a resolved category set.

    Preserves the vendor's declared order, duplicates included.
    """
    if not vendor.categories or not relevant_categories:
        return []
    return [category for category in vendor.categories if category in relevant_categories]


def matching_categories(
    vendor: VendorLike,
    tags: Sequence[str] | None,
    translator: CategoryTranslator | None = None,
) -> list[str]:
    """Categories of a vendor that match an asset's tags.

    Args:
        vendor: Vendor to explain.
        tags: Asset tags, current or legacy.
        translator: Translator to use (default: packaged tables).

    Returns:
        The vendor's matching categories in its declared order; empty when
        there are no tags or the vendor declares no categories.
    """
    if not tags or not vendor.categories:
        return []

    return filter_matching(vendor, resolve_categories(tags, translator))


def relevance_for(vendor: VendorLike, relevant_categories: Collection[str]) -> RelevanceResult:
    """Score and matching categories against an already resolved set."""
    return RelevanceResult(
        score=score_vendor(vendor, relevant_categories),
        matching_categories=tuple(filter_matching(vendor, relevant_categories)),
    )


def relevance(
    vendor: VendorLike,
    tags: Iterable[str] | None,
    translator: CategoryTranslator | None = None,
) -> RelevanceResult:
    """Relevance of a vendor to an asset's tags.

    Returns a zero result when there are no tags or none of them resolve
    to a category.
    """
    if not tags:
        return RelevanceResult()

    relevant = resolve_categories(tags, translator)
    if not relevant:
        return RelevanceResult()

    return relevance_for(vendor, relevant)
