"""
Concert Catalog CLI - search and browse a show catalog from the terminal.
"""

import argparse
import sys
from typing import Optional

from loguru import logger

from concert_catalog.core import (
    Config,
    get_log_file_path,
    load_config,
    log,
    print_table,
    safe_print,
    setup_loguru,
)
from concert_catalog.domain.catalog import (
    CatalogError,
    format_card,
    group_by_artist,
    list_artists,
    load_shows,
)
from concert_catalog.domain.search import (
    FieldFilter,
    SEARCH_HINT,
    SEARCH_PLACEHOLDER,
    filter_shows,
    parse,
)

RESULT_COLUMNS = ("Year", "Location", "Venue / Event", "Type", "Length")


def _catalog_path(args: argparse.Namespace, config: Config) -> str:
    return args.catalog or config.catalog.catalog_path


def run_search(
    catalog: str, query: str, config: Config, limit: Optional[int] = None
) -> int:
    """Print shows matching a query, one table per artist.

    Args:
        catalog: Path to the catalog JSON file
        query: Raw query text
        config: Loaded configuration
        limit: Max shows to print (default: config.search.result_limit)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        shows = load_shows(catalog)
    except CatalogError as e:
        log(f"Error: {e}", level="error")
        return 1

    results = filter_shows(shows, query)
    limit = limit or config.search.result_limit
    logger.info(f"Search {query!r}: {len(results)} of {len(shows)} shows")

    if not results:
        safe_print(f"No shows match: {query}", style="yellow")
        return 0

    printed = 0
    for artist, rows in group_by_artist(results[:limit]).items():
        cards = [
            format_card(show, base_url=config.catalog.image_base_url)
            for show in rows[: config.search.shows_per_artist]
        ]
        printed += print_table(
            artist,
            RESULT_COLUMNS,
            (
                (
                    card.year_label,
                    card.location,
                    card.event_or_festival or card.venue_name,
                    card.recording_type,
                    card.duration,
                )
                for card in cards
            ),
            right_aligned=("Length",),
        )

    safe_print(f"{printed} of {len(results)} matching shows", style="dim")
    return 0


def run_artists(catalog: str) -> int:
    """Print every artist in the catalog."""
    try:
        shows = load_shows(catalog)
    except CatalogError as e:
        log(f"Error: {e}", level="error")
        return 1

    for artist in list_artists(shows):
        safe_print(artist)
    return 0


def run_parse(query: str) -> int:
    """Print the clauses a query parses into."""
    expression = parse(query)
    if not expression:
        safe_print("(empty query - matches every show)", style="dim")
        return 0

    for clause in expression:
        if isinstance(clause, FieldFilter):
            safe_print(f"field  {clause.field}: {clause.value}", style="cyan")
        else:
            safe_print(f"text   {clause.value}")
    return 0


def _hint_epilog() -> str:
    lines = ["Field filters:"]
    lines += [f"  {field}:{example}" for field, example in SEARCH_HINT.items()]
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="concert-catalog",
        description="Concert Catalog - search recorded shows by artist, song, type, country and year",
        epilog=_hint_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")

    search_parser = subparsers.add_parser(
        "search", help="Search the catalog", description=SEARCH_PLACEHOLDER
    )
    search_parser.add_argument("query", nargs="*", help="Query text, e.g. artist:pearl year:1999")
    search_parser.add_argument("--catalog", help="Catalog JSON file (default: from config)")
    search_parser.add_argument("--limit", type=int, help="Max shows to print")

    artists_parser = subparsers.add_parser("artists", help="List artists in the catalog")
    artists_parser.add_argument("--catalog", help="Catalog JSON file (default: from config)")

    parse_parser = subparsers.add_parser("parse", help="Show how a query is parsed")
    parse_parser.add_argument("query", nargs="*", help="Query text")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the concert-catalog command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.subcommand:
        parser.print_help()
        sys.exit(0)

    config = load_config()
    level = (args.log_level or config.logging.level).upper()
    setup_loguru(
        get_log_file_path(config),
        level=level,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count,
        console_output=config.logging.console_output,
    )

    if args.subcommand == "search":
        if args.limit is not None and args.limit <= 0:
            parser.error("--limit must be positive")
        query = " ".join(args.query)
        sys.exit(run_search(_catalog_path(args, config), query, config, args.limit))

    elif args.subcommand == "artists":
        sys.exit(run_artists(_catalog_path(args, config)))

    elif args.subcommand == "parse":
        sys.exit(run_parse(" ".join(args.query)))


if __name__ == "__main__":
    main()
