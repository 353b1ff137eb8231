"""Vendor ranking by relevance to an asset's tags.

Ordering:
- Scored mode: relevance score descending, then display name ascending.
- Fallback mode (no tags, or no tag resolves to a category): display
  name ascending.

Names compare by code point unless the ranking config selects
``casefold``. When ``tie_break_on_id`` is set, vendors with equal
names are ordered by ``str(id)``; anything still tied keeps its input
order.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence, TypeVar

from loguru import logger

from vmatch.core.config import RankingConfig
from vmatch.core.types import RankedVendor, RelevanceResult, VendorLike
from vmatch.matching.explain import relevance_for
from vmatch.matching.translator import CategoryTranslator, resolve_categories

V = TypeVar("V", bound=VendorLike)


def _name_key(collation: str) -> Callable[[VendorLike], tuple[str, ...]]:
    if collation == "casefold":
        return lambda vendor: (vendor.display_name.casefold(), vendor.display_name)
    return lambda vendor: (vendor.display_name,)


def _id_key(vendor: Any) -> str:
    vendor_id = getattr(vendor, "id", None)
    return "" if vendor_id is None else str(vendor_id)


def sort_key(config: RankingConfig) -> Callable[[VendorLike], tuple]:
    """Key for alphabetical (fallback) ordering under a ranking config."""
    by_name = _name_key(config.collation)
    if config.tie_break_on_id:
        return lambda vendor: (*by_name(vendor), _id_key(vendor))
    return by_name


def sort_alphabetically(
    vendors: Iterable[V],
    config: RankingConfig | None = None,
) -> list[V]:
    """Vendors ordered by display name, as a new list."""
    config = config or RankingConfig()
    config.validate()
    return sorted(vendors, key=sort_key(config))


def rank_vendors(
    vendors: Sequence[V],
    tags: Iterable[str] | None,
    translator: CategoryTranslator | None = None,
    config: RankingConfig | None = None,
) -> list[V]:
    """Order vendors by relevance to an asset's tags.

    The input is never modified; the result holds every input vendor
    exactly once.

    Args:
        vendors: Vendors to rank.
        tags: Asset tags (current or legacy); empty or None selects the
            alphabetical fallback.
        translator: Translator to use (default: packaged tables).
        config: Ranking config (default: code point collation, id tie-break).

    Returns:
        New list of the same vendor objects, most relevant first.

    Example:
        rank_vendors(
            [zeta_audio, alpha_audio, beta_printing],
            ["Audio"],
        )
        # [alpha_audio, zeta_audio, beta_printing]
    """
    return [ranked.vendor for ranked in rank_with_relevance(vendors, tags, translator, config)]


def rank_with_relevance(
    vendors: Sequence[V],
    tags: Iterable[str] | None,
    translator: CategoryTranslator | None = None,
    config: RankingConfig | None = None,
) -> list[RankedVendor]:
    """Rank vendors and attach the relevance behind each position.

    Same ordering as ``rank_vendors``. In fallback mode every vendor
    carries a zero RelevanceResult.
    """
    config = config or RankingConfig()
    config.validate()
    by_name = sort_key(config)

    relevant = resolve_categories(tags, translator) if tags else frozenset()

    if not relevant:
        logger.debug(f"Ranking {len(vendors)} vendors alphabetically (no category signal)")
        return [
            RankedVendor(vendor, RelevanceResult())
            for vendor in sorted(vendors, key=by_name)
        ]

    logger.debug(
        f"Ranking {len(vendors)} vendors against {len(relevant)} categories: "
        f"{sorted(relevant)}"
    )

    ranked = [RankedVendor(vendor, relevance_for(vendor, relevant)) for vendor in vendors]
    ranked.sort(key=lambda item: (-item.relevance.score, *by_name(item.vendor)))
    return ranked

