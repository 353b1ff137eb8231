"""Tests for vendor relevance scoring."""

from types import SimpleNamespace

from vmatch.matching.scoring import score_vendor


class TestScoreVendor:
    """Tests for score_vendor()."""

    def test_no_matching_categories(self, make_vendor):
        """Vendors without a relevant category score 0."""
        vendor = make_vendor("Print Co", ["Printing", "Graphics"])

        assert score_vendor(vendor, {"Audio", "Video"}) == 0

    def test_single_match(self, make_vendor):
        """Each matching category adds one point."""
        vendor = make_vendor("Sound Co", ["Audio", "Printing"])

        assert score_vendor(vendor, {"Audio", "Video"}) == 1

    def test_multiple_matches(self, make_vendor):
        """Every matching category counts."""
        vendor = make_vendor("AV Co", ["Audio", "Video", "Lighting"])

        assert score_vendor(vendor, {"Audio", "Video"}) == 2

    def test_no_declared_categories(self, make_vendor):
        """Vendors declaring nothing score 0."""
        assert score_vendor(make_vendor("Empty"), {"Audio"}) == 0

    def test_none_categories(self):
        """A vendor whose categories are None scores 0."""
        vendor = SimpleNamespace(display_name="Legacy", categories=None)

        assert score_vendor(vendor, {"Audio"}) == 0

    def test_empty_relevant_set(self, make_vendor):
        """Nothing can match an empty category set."""
        assert score_vendor(make_vendor("AV Co", ["Audio"]), frozenset()) == 0

    def test_duplicate_declared_category_counts_twice(self, make_vendor):
        """A category declared twice scores once per declaration."""
        vendor = make_vendor("Double Audio", ["Audio", "Audio", "Printing"])

        assert score_vendor(vendor, {"Audio"}) == 2

    def test_superset_never_scores_lower(self, make_vendor):
        """Adding declared categories never lowers the score."""
        relevant = {"Graphics", "Video"}
        base = make_vendor("Graphics Only", ["Graphics"])
        superset = make_vendor("Both", ["Graphics", "Video", "Catering"])

        assert score_vendor(superset, relevant) >= score_vendor(base, relevant)

    def test_accepts_any_collection(self, make_vendor):
        """Relevant categories may be any container supporting membership."""
        vendor = make_vendor("AV Co", ["Audio", "Video"])

        assert score_vendor(vendor, ["Video"]) == 1
