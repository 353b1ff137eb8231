"""CLI entry point for vmatch."""

import argparse
import sys
from typing import NoReturn

from loguru import logger

from .. import __version__
from ..core.config import Config
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="vmatch",
        description="Vendor relevance matching - rank vendors for asset quote requests",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-c", "--config", default=None, help="Path to a TOML config file")

    subparsers = parser.add_subparsers(dest="command", required=False)

    subparsers.add_parser("check", help="Check taxonomy and translation tables for drift")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve tags to vendor categories")
    resolve_parser.add_argument("tags", nargs="+", help="Asset tags")

    rank_parser = subparsers.add_parser("rank", help="Rank vendors for asset tags")
    commands.add_rank_arguments(rank_parser)

    tags_parser = subparsers.add_parser("tags", help="List taxonomy tags")
    commands.add_tags_arguments(tags_parser)

    return parser


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, dispatch the command and return an exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env_or_file(args.config)
        configure_logging("DEBUG" if args.verbose else config.log_level)

        if args.command == "check":
            return commands.handle_check(args, config)
        elif args.command == "resolve":
            return commands.handle_resolve(args, config)
        elif args.command == "rank":
            return commands.handle_rank(args, config)
        elif args.command == "tags":
            return commands.handle_tags(args, config)

        parser.print_help()
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main() -> NoReturn:
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
