"""Taxonomy consistency check command for vmatch CLI."""

from ...core.config import Config
from ...matching.engine import RelevanceEngine


def handle_check(args, config: Config) -> int:
    """Handle check command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.

    Returns:
        Exit code: 0 when consistent, 1 on drift.
    """
    # Report drift instead of raising at load time
    config.taxonomy.strict = False
    engine = RelevanceEngine.from_config(config)
    report = engine.check()

    print("Taxonomy Consistency")
    print("=" * 50)
    print(f"Tags: {len(engine.taxonomy)}")
    print(f"Current translations: {len(engine.translator.current)}")
    print(f"Legacy translations: {len(engine.translator.legacy)}")
    print(f"Categories: {len(engine.vocabulary)}")
    print()

    for tag in report.missing_tags:
        print(f"  MISSING  {tag}: no translation entry")
    for tag in report.stale_tags:
        print(f"  STALE    {tag}: translated but not in taxonomy")
    for table, tag, category in report.unknown_categories:
        print(f"  UNKNOWN  {tag} -> {category} ({table} table)")
    for tag in report.unmapped_tags:
        print(f"  NOTE     {tag}: maps to no vendor category")

    print()
    print("OK" if report.ok else f"DRIFT: {report.summary()}")
    return 0 if report.ok else 1
