"""
Collect Arena card data.

Downloads the 17Lands card list and Scryfall bulk data, merges them and
writes the result as JSON Lines and, optionally, to the cards table.

Usage:
    python -m arenacards.jobs.collect_cards collect --verbose
    python -m arenacards.jobs.collect_cards info mtg_cards.jsonl
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from arenacards.config import DEFAULT_MATCH_CONFIG, MatchConfig, settings
from arenacards.db.database import init_db, make_engine, make_session_factory
from arenacards.db.operations import write_cards
from arenacards.errors import CardDataError, DownloadError
from arenacards.models.card import MergedCard
from arenacards.services.card_merger import CardMerger
from arenacards.services.downloads import fetch_lands_cards, fetch_scryfall_cards, make_client
from arenacards.services.summary import format_summary, summarize
from arenacards.writers.jsonl import read_jsonl, write_jsonl

logger = logging.getLogger(__name__)


async def save_to_database(cards: list[MergedCard], database_url: str) -> int:
    """Create the cards table if needed and upsert every card."""
    engine = make_engine(database_url)
    try:
        await init_db(engine)
        async with make_session_factory(engine)() as session:
            count = await write_cards(session, cards)
            await session.commit()
    finally:
        await engine.dispose()
    return count


async def run_collect(
    scryfall_url: str | None = None,
    lands_url: str | None = None,
    output_file: Path | None = None,
    database_url: str | None = None,
    cache_dir: Path | None = None,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> list[MergedCard]:
    """
    Run a full collection.

    Args:
        scryfall_url: Scryfall bulk JSON URL; None resolves the latest file
        lands_url: 17Lands cards.csv URL, defaults to settings.lands_url
        output_file: JSONL destination, defaults to settings.output_file
        database_url: When given, cards are also written to this database
        cache_dir: Download cache, defaults to settings.cache_dir
        config: Static matching tables

    Returns:
        The merged cards
    """
    output_file = output_file or settings.output_file

    async with make_client() as client:
        logger.info("Downloading Scryfall JSON data...")
        scryfall_cards = await fetch_scryfall_cards(scryfall_url, cache_dir, client)
        logger.info("Downloaded %d cards from Scryfall", len(scryfall_cards))

        logger.info("Downloading 17Lands CSV data...")
        lands_cards = await fetch_lands_cards(lands_url, cache_dir, client)
        logger.info("Downloaded %d cards from 17Lands", len(lands_cards))

    logger.info("Merging card data...")
    merged = CardMerger(config).merge(scryfall_cards, lands_cards)
    logger.info("Merged data for %d cards", len(merged))

    count = write_jsonl(merged, output_file)
    logger.info("Wrote %d cards to %s", count, output_file)

    if database_url:
        count = await save_to_database(merged, database_url)
        logger.info("Wrote %d cards to database", count)

    for line in format_summary(summarize(merged)):
        logger.info(line)

    return merged


def run_info(path: Path) -> list[str]:
    """
    Summarize a JSONL card file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        CardDataError: If the file holds invalid records
    """
    if not path.exists():
        raise FileNotFoundError(f"Card file not found: {path}")
    return format_summary(summarize(read_jsonl(path)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arenacards",
        description="Merge 17Lands and Scryfall data into one MTG Arena card collection",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    collect = subparsers.add_parser("collect", help="Download and merge card data")
    collect.add_argument(
        "-s",
        "--scryfall-url",
        default=settings.scryfall_url,
        help="Scryfall bulk JSON URL (default: latest default_cards file)",
    )
    collect.add_argument(
        "-l",
        "--lands-url",
        default=settings.lands_url,
        help="17Lands cards.csv URL",
    )
    collect.add_argument(
        "-o",
        "--output",
        type=Path,
        default=settings.output_file,
        help=f"Output JSONL file (default: {settings.output_file})",
    )
    collect.add_argument(
        "--database-url",
        default=settings.database_url,
        help="SQLAlchemy async database URL for the cards table",
    )
    collect.add_argument(
        "--no-database",
        action="store_true",
        help="Only write the JSONL file",
    )
    collect.add_argument(
        "--cache-dir",
        type=Path,
        default=settings.cache_dir,
        help=f"Download cache directory (default: {settings.cache_dir})",
    )

    info = subparsers.add_parser("info", help="Show information about a JSONL card file")
    info.add_argument("file", type=Path, help="JSONL file to analyze")

    for subparser in (collect, info):
        subparser.add_argument(
            "-v", "--verbose", action="store_true", help="Enable verbose logging"
        )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.command == "collect":
            asyncio.run(
                run_collect(
                    scryfall_url=args.scryfall_url,
                    lands_url=args.lands_url,
                    output_file=args.output,
                    database_url=None if args.no_database else args.database_url,
                    cache_dir=args.cache_dir,
                )
            )
            logger.info("Collection completed successfully")
        else:
            for line in run_info(args.file):
                print(line)
    except (DownloadError, CardDataError, SQLAlchemyError, FileNotFoundError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
