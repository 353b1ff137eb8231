"""Vendor relevance matching and ranking.

Provides:
- CategoryTranslator: Asset tag to vendor category translation
- score_vendor: Relevance score for one vendor
- matching_categories / relevance: Why a vendor matched
- rank_vendors / rank_with_relevance: Relevance ordering with alphabetical fallback
- check_consistency: Taxonomy drift detection
- RelevanceEngine: All of the above over one loaded taxonomy
"""

from vmatch.matching.consistency import ConsistencyReport, check_consistency
from vmatch.matching.engine import RelevanceEngine
from vmatch.matching.explain import matching_categories, relevance, relevance_for
from vmatch.matching.ranking import rank_vendors, rank_with_relevance, sort_alphabetically
from vmatch.matching.scoring import score_vendor
from vmatch.matching.translator import (
    CategoryTranslator,
    load_default_translator,
    load_translation_table,
    load_translator,
    resolve_categories,
)

__all__ = [
    "CategoryTranslator",
    "load_translation_table",
    "load_translator",
    "load_default_translator",
    "resolve_categories",
    "score_vendor",
    "matching_categories",
    "relevance",
    "relevance_for",
    "rank_vendors",
    "rank_with_relevance",
    "sort_alphabetically",
    "ConsistencyReport",
    "check_consistency",
    "RelevanceEngine",
]
