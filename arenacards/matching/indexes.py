"""
Lookup indexes over Scryfall bulk data.

Built once per collection run, read-only afterwards. Multi-value buckets
keep catalog order, which candidate selection relies on.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from arenacards.config import SPLIT_SEPARATOR
from arenacards.matching.normalize import normalize_name
from arenacards.models.card import ScryfallCard

logger = logging.getLogger(__name__)


def name_set_key(name: str, set_code: str) -> str:
    """Key for the exact name+set index."""
    return f"{name}|{set_code.lower()}"


@dataclass
class IndexStats:
    """Counters gathered while indexing. Observability only."""

    indexed: int = 0
    skipped: int = 0
    split_cards: int = 0


@dataclass
class CardIndexes:
    """The four lookup structures the match cascade consults."""

    by_name_set: dict[str, ScryfallCard] = field(default_factory=dict)
    by_arena_id: dict[int, ScryfallCard] = field(default_factory=dict)
    by_name: dict[str, list[ScryfallCard]] = field(default_factory=dict)
    by_normalized_name: dict[str, list[ScryfallCard]] = field(default_factory=dict)
    stats: IndexStats = field(default_factory=IndexStats)


def build_indexes(cards: Iterable[ScryfallCard]) -> CardIndexes:
    """
    Index Scryfall printings in a single pass.

    Args:
        cards: Scryfall printings in catalog order

    Returns:
        CardIndexes. Single-valued indexes keep the last printing seen for a
        key; multi-valued indexes keep every printing in catalog order.
        Printings without a name or set are skipped and counted.
    """
    indexes = CardIndexes()
    stats = indexes.stats

    for card in cards:
        if not card.name or not card.set:
            stats.skipped += 1
            continue

        indexes.by_name_set[name_set_key(card.name, card.set)] = card

        if card.arena_id is not None:
            indexes.by_arena_id[card.arena_id] = card

        indexes.by_name.setdefault(card.name, []).append(card)
        indexes.by_normalized_name.setdefault(normalize_name(card.name), []).append(card)

        if SPLIT_SEPARATOR in card.name:
            stats.split_cards += 1
        stats.indexed += 1

    logger.debug("Found %d split cards in Scryfall data", stats.split_cards)
    logger.info(
        "indexes_built",
        extra={
            "indexed": stats.indexed,
            "skipped": stats.skipped,
            "name_set": len(indexes.by_name_set),
            "arena_id": len(indexes.by_arena_id),
            "name_only": len(indexes.by_name),
            "normalized": len(indexes.by_normalized_name),
        },
    )
    if stats.skipped:
        logger.warning("Skipped %d Scryfall cards missing a name or set", stats.skipped)

    return indexes
