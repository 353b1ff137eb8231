"""Vendor relevance matching and ranking for asset quote requests."""

from vmatch.core import Config, RankedVendor, RelevanceResult, Vendor
from vmatch.matching import (
    CategoryTranslator,
    RelevanceEngine,
    matching_categories,
    rank_vendors,
    resolve_categories,
    score_vendor,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Config",
    "Vendor",
    "RelevanceResult",
    "RankedVendor",
    "CategoryTranslator",
    "RelevanceEngine",
    "resolve_categories",
    "score_vendor",
    "matching_categories",
    "rank_vendors",
]
