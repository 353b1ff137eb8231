"""Relevance engine: taxonomy, translator and ranking config in one place."""

from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

from loguru import logger

from vmatch.core.config import Config
from vmatch.core.types import RankedVendor, RelevanceResult, VendorLike
from vmatch.matching.consistency import ConsistencyReport, check_consistency
from vmatch.matching.explain import matching_categories, relevance
from vmatch.matching.ranking import rank_vendors, rank_with_relevance
from vmatch.matching.scoring import score_vendor
from vmatch.matching.translator import (
    DEFAULT_LEGACY_TRANSLATION_FILE,
    DEFAULT_TRANSLATION_FILE,
    CategoryTranslator,
    load_translator,
)
from vmatch.taxonomy.model import (
    DEFAULT_TAXONOMY_FILE,
    CategoryVocabulary,
    TagTaxonomy,
    load_taxonomy,
    load_vocabulary,
)

V = TypeVar("V", bound=VendorLike)


class RelevanceEngine:
    """Entry point for vendor matching.

    Holds one loaded taxonomy, category vocabulary and translator, and
    the ranking config. All of them are read-only after construction, so
    an engine can be shared between threads.

    Usage:

        engine = RelevanceEngine.from_config(Config.from_env())
        ranked = engine.rank(vendors, asset.tags)
        for vendor in ranked:
            badges = engine.matching_categories(vendor, asset.tags)

    Attributes:
        config: Application configuration.
        taxonomy: Canonical asset tags.
        vocabulary: Vendor category vocabulary.
        translator: Tag to category translator.
    """

    def __init__(
        self,
        taxonomy: TagTaxonomy,
        vocabulary: CategoryVocabulary,
        translator: CategoryTranslator,
        config: Config | None = None,
    ):
        """Initialize the engine and run the startup consistency check.

        Raises:
            ConfigError: If the ranking config is invalid.
            TaxonomyDriftError: If ``config.taxonomy.strict`` is set and the
                tables have drifted from the taxonomy.
        """
        self.config = config or Config()
        self.config.ranking.validate()
        self.taxonomy = taxonomy
        self.vocabulary = vocabulary
        self.translator = translator

        report = self.check()
        if self.config.taxonomy.strict:
            report.raise_for_drift()
        elif not report.ok:
            logger.warning(f"Taxonomy drift: {report.summary()}")

    @classmethod
    def from_config(cls, config: Config) -> "RelevanceEngine":
        """Load taxonomy data from configured paths or packaged defaults."""
        paths = config.taxonomy
        taxonomy_path = paths.taxonomy_path or DEFAULT_TAXONOMY_FILE

        taxonomy = load_taxonomy(taxonomy_path)
        vocabulary = load_vocabulary(taxonomy_path)
        translator = load_translator(
            paths.translation_path or DEFAULT_TRANSLATION_FILE,
            paths.legacy_translation_path or DEFAULT_LEGACY_TRANSLATION_FILE,
        )

        logger.debug(
            f"Loaded taxonomy v{taxonomy.version} from {taxonomy_path}: "
            f"{len(taxonomy)} tags, {len(vocabulary)} categories"
        )
        return cls(taxonomy, vocabulary, translator, config)

    @classmethod
    def default(cls) -> "RelevanceEngine":
        """Engine over the packaged taxonomy data with default config."""
        return cls.from_config(Config())

    def check(self) -> ConsistencyReport:
        """Compare the loaded taxonomy with the translation tables."""
        return check_consistency(self.taxonomy, self.translator, self.vocabulary)

    def resolve_categories(self, tags: Iterable[str] | None) -> frozenset[str]:
        """Categories implied by an asset's tags."""
        return self.translator.resolve_categories(tags)

    def score(self, vendor: VendorLike, relevant_categories: Iterable[str]) -> int:
        """Score a vendor against a resolved category set."""
        return score_vendor(vendor, frozenset(relevant_categories))

    def matching_categories(self, vendor: VendorLike, tags: Sequence[str] | None) -> list[str]:
        """Declared categories of a vendor that match an asset's tags."""
        return matching_categories(vendor, tags, self.translator)

    def relevance(self, vendor: VendorLike, tags: Iterable[str] | None) -> RelevanceResult:
        """Score and matching categories of a vendor for an asset's tags."""
        return relevance(vendor, tags, self.translator)

    def rank(self, vendors: Sequence[V], tags: Iterable[str] | None) -> list[V]:
        """Vendors ordered by relevance to an asset's tags."""
        return rank_vendors(vendors, tags, self.translator, self.config.ranking)

    def rank_with_relevance(
        self, vendors: Sequence[V], tags: Iterable[str] | None
    ) -> list[RankedVendor]:
        """Ranked vendors with the relevance behind each position."""
        return rank_with_relevance(vendors, tags, self.translator, self.config.ranking)
