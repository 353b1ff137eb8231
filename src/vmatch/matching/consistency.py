"""Consistency checks between the tag taxonomy and translation tables.

A taxonomy tag with no translation entry silently drops out of vendor
matching. These checks find that kind of drift so it can fail a test
or a startup check instead of degrading rankings.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from vmatch.core.exceptions import TaxonomyDriftError
from vmatch.matching.translator import CategoryTranslator
from vmatch.taxonomy.model import CategoryVocabulary, TagTaxonomy


@dataclass
class ConsistencyReport:
    """Result of comparing a taxonomy with its translation tables.

    Attributes:
        missing_tags: Taxonomy tags with no entry in the current table.
        stale_tags: Current-table keys that are not taxonomy tags.
        unmapped_tags: Taxonomy tags mapped to no category. Informational.
        unknown_categories: Table categories outside the vocabulary,
            as (table, tag, category) triples.
    """

    missing_tags: list[str] = field(default_factory=list)
    stale_tags: list[str] = field(default_factory=list)
    unmapped_tags: list[str] = field(default_factory=list)
    unknown_categories: list[tuple[str, str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when nothing but informational findings were reported."""
        return not (self.missing_tags or self.stale_tags or self.unknown_categories)

    def summary(self) -> str:
        """One-line description of the findings."""
        if self.ok:
            return f"consistent ({len(self.unmapped_tags)} tags without categories)"

        parts = []
        if self.missing_tags:
            parts.append(f"missing translations for {', '.join(self.missing_tags)}")
        if self.stale_tags:
            parts.append(f"translations for unknown tags {', '.join(self.stale_tags)}")
        if self.unknown_categories:
            unknown = sorted({category for _, _, category in self.unknown_categories})
            parts.append(f"unknown categories {', '.join(unknown)}")
        return "; ".join(parts)

    def raise_for_drift(self) -> None:
        """Raise if the report found drift.

        Raises:
            TaxonomyDriftError: If ``ok`` is False.
        """
        if not self.ok:
            raise TaxonomyDriftError(self)


def check_consistency(
    taxonomy: TagTaxonomy,
    translator: CategoryTranslator,
    vocabulary: CategoryVocabulary | None = None,
) -> ConsistencyReport:
    """Compare the taxonomy against the translator's tables.

    Args:
        taxonomy: Canonical current tags.
        translator: Translator holding the current and legacy tables.
        vocabulary: Category vocabulary; when None, categories are not checked.

    Returns:
        ConsistencyReport with findings in taxonomy / table order.
    """
    report = ConsistencyReport()
    names = taxonomy.names()
    known = set(names)

    for name in names:
        if name not in translator.current:
            report.missing_tags.append(name)
        elif not translator.current[name]:
            report.unmapped_tags.append(name)

    report.stale_tags = [tag for tag in translator.current if tag not in known]

    if vocabulary is not None:
        for table_name, table in (("current", translator.current), ("legacy", translator.legacy)):
            for tag, categories in table.items():
                for category in categories:
                    if category not in vocabulary:
                        report.unknown_categories.append((table_name, tag, category))

    return report
