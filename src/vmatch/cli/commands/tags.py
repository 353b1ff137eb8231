"""Taxonomy listing and tag resolution commands for vmatch CLI."""

import argparse

from ...core.config import Config
from ...matching.engine import RelevanceEngine


def add_tags_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments for the tags command."""
    parser.add_argument("-s", "--search", default="", help="Filter by name or description")


def handle_tags(args, config: Config) -> int:
    """Handle tags command: list taxonomy tags and their categories."""
    engine = RelevanceEngine.from_config(config)
    tags = engine.taxonomy.search(args.search)

    if not tags:
        print(f"No tags match {args.search!r}.")
        return 0

    for tag in tags:
        categories = ", ".join(engine.translator.categories_for(tag.name)) or "-"
        print(f"{tag.name:<24} {categories}")
        if tag.description:
            print(f"{'':<24} {tag.description}")
    return 0


def handle_resolve(args, config: Config) -> int:
    """Handle resolve command: show which categories tags translate to."""
    engine = RelevanceEngine.from_config(config)

    for tag in args.tags:
        source = engine.translator.source_of(tag).value
        categories = ", ".join(engine.translator.categories_for(tag)) or "-"
        print(f"{tag:<28} {source:<8} {categories}")

    resolved = sorted(engine.resolve_categories(args.tags))
    print()
    print(f"Categories: {', '.join(resolved) if resolved else '(none, alphabetical fallback)'}")
    return 0
