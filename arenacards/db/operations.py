"""
Database operations for merged cards.

Provides async functions for writing, reading and summarizing the cards table.
"""

import logging
from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from arenacards.models.card import MergedCard
from arenacards.models.db import MergedCardDB
from arenacards.services.summary import TOP_SETS_LIMIT, CollectionSummary

logger = logging.getLogger(__name__)

# Progress is flushed and logged every this many cards
_FLUSH_EVERY = 1000


async def write_cards(session: AsyncSession, cards: Sequence[MergedCard]) -> int:
    """
    Upsert merged cards by composite id.

    Existing rows with the same id are replaced. When the input repeats an
    id, the last occurrence wins.

    Returns:
        Number of rows written
    """
    latest: dict[str, MergedCard] = {}
    for card in cards:
        latest[card.id] = card

    if len(latest) < len(cards):
        logger.warning(
            "duplicate_card_ids",
            extra={"input": len(cards), "unique": len(latest)},
        )

    for written, card in enumerate(latest.values(), start=1):
        # merge() updates an existing row with the same primary key
        await session.merge(MergedCardDB.from_card(card))
        if written % _FLUSH_EVERY == 0:
            await session.flush()
            logger.debug("Inserted %d cards so far...", written)

    await session.flush()

    logger.debug("Database insertion complete: %d cards", len(latest))
    return len(latest)


async def get_card(session: AsyncSession, card_id: str) -> MergedCard | None:
    """Get one merged card by composite id. Returns None if absent."""
    row = await session.get(MergedCardDB, card_id)
    return row.to_card() if row is not None else None


async def get_cards_by_arena_id(session: AsyncSession, arena_id: int) -> list[MergedCard]:
    """All merged cards sharing an Arena ID, ordered by id."""
    result = await session.execute(
        select(MergedCardDB).where(MergedCardDB.arena_id == arena_id).order_by(MergedCardDB.id)
    )
    return [row.to_card() for row in result.scalars()]


async def database_summary(session: AsyncSession) -> CollectionSummary:
    """Aggregate the cards table into a CollectionSummary."""
    total = await session.scalar(select(func.count()).select_from(MergedCardDB)) or 0

    count = func.count().label("count")
    source_rows = await session.execute(
        select(MergedCardDB.source, count).group_by(MergedCardDB.source).order_by(count.desc())
    )
    set_rows = await session.execute(
        select(MergedCardDB.set_code, func.max(MergedCardDB.set_name), count)
        .group_by(MergedCardDB.set_code)
        .order_by(count.desc(), MergedCardDB.set_code)
        .limit(TOP_SETS_LIMIT)
    )
    rarity_rows = await session.execute(
        select(MergedCardDB.rarity, count).group_by(MergedCardDB.rarity).order_by(count.desc())
    )
    with_arena_id = (
        await session.scalar(
            select(func.count())
            .select_from(MergedCardDB)
            .where(MergedCardDB.arena_id.is_not(None))
        )
        or 0
    )

    return CollectionSummary(
        total=total,
        by_source={source: n for source, n in source_rows.all()},
        top_sets=[(code, name, n) for code, name, n in set_rows.all()],
        by_rarity={rarity: n for rarity, n in rarity_rows.all()},
        with_arena_id=with_arena_id,
    )
