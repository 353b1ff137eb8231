"""Vendor ranking command for vmatch CLI."""

import argparse
import json
from pathlib import Path

from ...core.config import Config
from ...core.exceptions import VendorRecordError
from ...core.types import RankedVendor, Vendor
from ...matching.engine import RelevanceEngine


def add_rank_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments for the rank command."""
    parser.add_argument("vendors", help="JSON file with a list of vendor records")
    parser.add_argument(
        "-t",
        "--tag",
        dest="tags",
        action="append",
        default=[],
        help="Asset tag (repeatable)",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Show score and matching categories per vendor",
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")


def load_vendors(path: Path | str) -> list[Vendor]:
    """Load vendor records from a JSON file.

    Accepts a list of records or an object with a "vendors" list.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        json.JSONDecodeError: If the file is not valid JSON.
        VendorRecordError: If the file holds no vendor list or a record is incomplete.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    records = data.get("vendors") if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise VendorRecordError(f"{path}: expected a list of vendor records")

    return [Vendor.from_record(record) for record in records]


def handle_rank(args, config: Config) -> int:
    """Handle rank command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    engine = RelevanceEngine.from_config(config)
    vendors = load_vendors(args.vendors)
    ranked = engine.rank_with_relevance(vendors, args.tags)

    if args.json:
        print(json.dumps([_to_dict(item) for item in ranked], indent=2))
    else:
        _print_ranking(ranked, explain=args.explain)
    return 0


def _to_dict(item: RankedVendor) -> dict:
    return {
        "id": item.vendor.id,
        "display_name": item.vendor.display_name,
        "score": item.relevance.score,
        "matching_categories": list(item.relevance.matching_categories),
    }


def _print_ranking(ranked: list[RankedVendor], explain: bool) -> None:
    if not ranked:
        print("No vendors.")
        return

    for position, item in enumerate(ranked, 1):
        line = f"{position:>3}. {item.vendor.display_name}"
        if explain:
            matched = ", ".join(item.relevance.matching_categories) or "-"
            line += f"  [score {item.relevance.score}: {matched}]"
        print(line)
