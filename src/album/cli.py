"""
Album Pipeline CLI - Command Line Interface

Prints the results of the collection pipeline operations over the sample albums.
"""

import argparse
import logging
import sys
from typing import List, Optional

from src.config import ExamplesConfig
from src.logger import setup_logging

from . import __version__
from .catalog import best_of_rock_and_pop, sample_groups
from .pipeline import album_names, flatten_songs, print_titles, titles_containing

logger = logging.getLogger(__name__)

SEPARATOR = "-------"


def create_parser() -> argparse.ArgumentParser:
    """
    Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="python -m src.album",
        description="Collection pipeline examples over the sample albums",
        epilog="Example: python -m src.album filter --term daddy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Print every title of the best-of album")

    filter_parser = subparsers.add_parser(
        "filter", help="Print best-of titles containing a term (case-sensitive)"
    )
    filter_parser.add_argument(
        "--term",
        type=str,
        default=None,
        metavar="TEXT",
        help="Substring to look for (default: SONGBOOK_FILTER_TERM or 'daddy')",
    )

    subparsers.add_parser(
        "flatten", help="Print album names, then every song of the nested sample groups"
    )

    return parser


def run_command(args: argparse.Namespace, config: ExamplesConfig) -> None:
    """
    Execute the selected command, printing results to stdout.

    Args:
        args: Parsed CLI arguments
        config: Loaded configuration
    """
    if args.command == "list":
        print_titles(best_of_rock_and_pop())

    elif args.command == "filter":
        term = args.term if args.term is not None else config.filter_term
        for title in titles_containing(best_of_rock_and_pop(), term):
            print(title)

    elif args.command == "flatten":
        groups = sample_groups()
        for name in album_names(groups):
            print(name)
        print(SEPARATOR)
        for song in flatten_songs(groups):
            print(song.title)

    else:
        raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Argument list (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = ExamplesConfig.from_environment()
        setup_logging(config)

        if args.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        run_command(args, config)
        return 0
    except Exception:
        logger.exception("Fatal error in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
