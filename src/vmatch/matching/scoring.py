"""Vendor relevance scoring.

A vendor's score is the number of its declared categories that fall in
the set of categories implied by an asset's tags.
"""

from __future__ import annotations

from typing import Collection

from vmatch.core.types import VendorLike


def score_vendor(vendor: VendorLike, relevant_categories: Collection[str]) -> int:
    """Score one vendor against a resolved category set.

    Counts by walking the vendor's declared list, so a category the
    vendor declares twice scores twice.

    Args:
        vendor: Vendor with ``categories`` (may be empty or None).
        relevant_categories: Categories resolved from the asset's tags.

    Returns:
        Number of declared categories in the relevant set (0 if none).

    Example:
        score_vendor(Vendor("v1", "Both", ("Graphics", "Video")), {"Graphics", "Video"})
        # 2
    """
    categories = vendor.categories
    if not categories or not relevant_categories:
        return 0

    return sum(1 for category in categories if category in relevant_categories)
