"""Tests for the relevance engine facade."""

import json

import pytest

from vmatch.core.config import Config, RankingConfig, TaxonomyConfig
from vmatch.core.exceptions import ConfigError, TaxonomyDriftError
from vmatch.matching.engine import RelevanceEngine


@pytest.fixture
def engine(data_files) -> RelevanceEngine:
    """Provide an engine over the test data files."""
    config = Config(
        taxonomy=TaxonomyConfig(
            taxonomy_path=data_files["taxonomy"],
            translation_path=data_files["current"],
            legacy_translation_path=data_files["legacy"],
        )
    )
    return RelevanceEngine.from_config(config)


class TestRelevanceEngineLoading:
    """Tests for building an engine."""

    def test_from_config_paths(self, engine):
        """Configured paths should be used for every table."""
        assert engine.taxonomy.version == 7
        assert engine.taxonomy.names()[0] == "Audio"
        assert "Beverages" in engine.vocabulary
        assert engine.translator.is_known("Microphones")

    def test_default_uses_packaged_data(self):
        """The default engine loads the shipped taxonomy."""
        engine = RelevanceEngine.default()

        assert engine.taxonomy.is_predefined("Floral & Decor")
        assert engine.check().ok

    def test_strict_raises_on_drift(self, data_files):
        """Strict mode refuses drifted tables."""
        drifted = data_files["current"].parent / "drifted.json"
        drifted.write_text(json.dumps({"mappings": {"Audio": ["Audio"]}}))
        config = Config(
            taxonomy=TaxonomyConfig(
                taxonomy_path=data_files["taxonomy"],
                translation_path=drifted,
                strict=True,
            )
        )

        with pytest.raises(TaxonomyDriftError):
            RelevanceEngine.from_config(config)

    def test_non_strict_loads_drifted_tables(self, data_files):
        """Without strict mode drift only warns."""
        drifted = data_files["current"].parent / "drifted.json"
        drifted.write_text(json.dumps({"mappings": {"Audio": ["Audio"]}}))
        config = Config(
            taxonomy=TaxonomyConfig(
                taxonomy_path=data_files["taxonomy"],
                translation_path=drifted,
            )
        )

        engine = RelevanceEngine.from_config(config)

        assert not engine.check().ok
        assert engine.resolve_categories(["Audio"]) == {"Audio"}

    def test_invalid_collation_rejected(self, data_files):
        """A bad ranking config fails at construction."""
        config = Config(
            taxonomy=TaxonomyConfig(taxonomy_path=data_files["taxonomy"]),
            ranking=RankingConfig(collation="klingon"),
        )

        with pytest.raises(ConfigError):
            RelevanceEngine.from_config(config)


class TestRelevanceEngineOperations:
    """The engine delegates to the matching functions with its own tables."""

    def test_resolve_categories(self, engine):
        """Resolution uses the engine's translator."""
        assert engine.resolve_categories(["Catering", "Microphones"]) == {"Catering", "Food", "Audio"}

    def test_score(self, engine, make_vendor):
        """Scores against a resolved set."""
        vendor = make_vendor("AV Co", ["Audio", "Video"])

        assert engine.score(vendor, engine.resolve_categories(["Video & Display"])) == 1

    def test_rank_and_explain(self, engine, make_vendor):
        """Rank, then explain each position."""
        vendors = [
            make_vendor("Zeta", ["Audio"]),
            make_vendor("Alpha", ["Audio"]),
            make_vendor("Beta", ["Printing"]),
        ]

        ranked = engine.rank(vendors, ["Audio"])

        assert [v.display_name for v in ranked] == ["Alpha", "Zeta", "Beta"]
        assert engine.matching_categories(ranked[0], ["Audio"]) == ["Audio"]
        assert engine.matching_categories(ranked[2], ["Audio"]) == []

    def test_relevance(self, engine, make_vendor):
        """relevance() bundles score and matches."""
        result = engine.relevance(make_vendor("Both", ["Graphics", "Video"]), ["Video & Display"])

        assert result.score == 2
        assert result.matching_categories == ("Graphics", "Video")

    def test_rank_with_relevance_uses_config(self, data_files, make_vendor):
        """The engine's ranking config applies to its rankings."""
        config = Config(
            taxonomy=TaxonomyConfig(
                taxonomy_path=data_files["taxonomy"],
                translation_path=data_files["current"],
            ),
            ranking=RankingConfig(collation="casefold"),
        )
        engine = RelevanceEngine.from_config(config)

        ranked = engine.rank_with_relevance([make_vendor("beta"), make_vendor("Alpha")], [])

        assert [item.vendor.display_name for item in ranked] == ["Alpha", "beta"]
