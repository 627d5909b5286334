"""
Card merge service.

Merges the 17Lands card list with Scryfall printings into one record per
17Lands card.

INVARIANTS:
1. 17Lands is the authority on which cards exist: one output per input card,
   in input order
2. arena_id, set code, rarity and is_booster always come from 17Lands
3. Merging never raises; data-quality problems are logged and counted
"""

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime

from arenacards.config import COLOR_LETTERS, DEFAULT_MATCH_CONFIG, MatchConfig
from arenacards.matching.indexes import build_indexes
from arenacards.matching.resolver import MatchType, find_best_match
from arenacards.models.card import CardSource, LandsCard, MergedCard, ScryfallCard

logger = logging.getLogger(__name__)

# How many duplicate ids to include in log output
_DUPLICATE_SAMPLE_SIZE = 5


def composite_id(expansion: str, arena_id: int) -> str:
    """Primary key of a merged card, e.g. ("M10", 42) -> "m10_42"."""
    return f"{expansion.lower()}_{arena_id}"


def parse_color_identity(raw: str | None) -> tuple[str, ...]:
    """
    Split a 17Lands color string into color letters.

    "WU" -> ("W", "U"). Characters other than W, U, B, R, G are dropped,
    so empty or unknown strings give an empty tuple.
    """
    if not raw:
        return ()
    return tuple(ch for ch in raw if ch in COLOR_LETTERS)


def find_duplicate_arena_ids(arena_ids: Sequence[int]) -> dict[int, int]:
    """Return {arena_id: occurrences} for ids seen more than once."""
    return {arena_id: n for arena_id, n in Counter(arena_ids).items() if n > 1}


def _log_duplicates(duplicates: dict[int, int], where: str) -> None:
    if not duplicates:
        return
    logger.warning(
        "duplicate_arena_ids",
        extra={
            "where": where,
            "count": len(duplicates),
            "sample": [
                f"{arena_id}({n}x)"
                for arena_id, n in list(duplicates.items())[:_DUPLICATE_SAMPLE_SIZE]
            ],
        },
    )


def create_merged_card(
    scryfall_card: ScryfallCard,
    lands_card: LandsCard,
    created_at: datetime | None = None,
) -> MergedCard:
    """
    Merge a matched pair.

    Scryfall supplies the descriptive fields; 17Lands supplies identity,
    set code as given, rarity and booster status.
    """
    return MergedCard(
        id=composite_id(lands_card.expansion, lands_card.arena_id),
        arena_id=lands_card.arena_id,
        name=scryfall_card.name,
        set_code=lands_card.expansion,
        # 17Lands rarity reflects what Arena currently sells
        rarity=lands_card.rarity,
        is_booster=lands_card.is_booster,
        source=CardSource.BOTH,
        created_at=created_at or datetime.now(UTC),
        mana_cost=scryfall_card.mana_cost,
        cmc=scryfall_card.cmc,
        type_line=scryfall_card.type_line,
        oracle_text=scryfall_card.oracle_text,
        colors=scryfall_card.colors,
        color_identity=scryfall_card.color_identity,
        keywords=scryfall_card.keywords,
        set_name=scryfall_card.set_name,
        collector_number=scryfall_card.collector_number,
        artist=scryfall_card.artist,
        flavor_text=scryfall_card.flavor_text,
        prices_usd=scryfall_card.prices_usd,
        prices_usd_foil=scryfall_card.prices_usd_foil,
        image_uri_normal=scryfall_card.image_uri_normal,
        image_uri_large=scryfall_card.image_uri_large,
        scryfall_uri=scryfall_card.scryfall_uri,
        legalities_standard=scryfall_card.legality("standard"),
        legalities_modern=scryfall_card.legality("modern"),
        legalities_commander=scryfall_card.legality("commander"),
        digital=scryfall_card.digital,
        foil=scryfall_card.foil,
        nonfoil=scryfall_card.nonfoil,
    )


def create_lands_only_card(
    lands_card: LandsCard,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
    created_at: datetime | None = None,
) -> MergedCard:
    """
    Build a merged card from 17Lands data alone.

    Cost, descriptive, image, price and legality fields stay empty. Color
    identity comes from the raw 17Lands color string; digital-only
    expansions get an inferred set name.
    """
    return MergedCard(
        id=composite_id(lands_card.expansion, lands_card.arena_id),
        arena_id=lands_card.arena_id,
        name=lands_card.name,
        set_code=lands_card.expansion,
        rarity=lands_card.rarity,
        is_booster=lands_card.is_booster,
        source=CardSource.PRIMARY_ONLY,
        created_at=created_at or datetime.now(UTC),
        type_line=lands_card.types,
        colors=(),
        color_identity=parse_color_identity(lands_card.color_identity),
        set_name=config.digital_set_names.get(lands_card.expansion.lower()),
        digital=config.is_digital_only(lands_card.expansion),
    )


@dataclass
class MergeStats:
    """Counters from one merge run. Observability only."""

    total: int = 0
    both: int = 0
    primary_only: int = 0
    unmatched_tokens: int = 0
    by_match_type: Counter[str] = field(default_factory=Counter)
    duplicate_arena_ids: dict[int, int] = field(default_factory=dict)

    @property
    def enhanced_matches(self) -> int:
        """Matches made by any strategy other than exact name+set."""
        return self.both - self.by_match_type[MatchType.EXACT.value]


class CardMerger:
    """
    Merges 17Lands cards with Scryfall printings.

    Holds the static match tables and the stats of the most recent run.
    """

    def __init__(self, config: MatchConfig = DEFAULT_MATCH_CONFIG) -> None:
        self._config = config
        self.last_stats = MergeStats()

    def merge(
        self,
        scryfall_cards: Sequence[ScryfallCard],
        lands_cards: Sequence[LandsCard],
    ) -> list[MergedCard]:
        """
        Merge both catalogs.

        Args:
            scryfall_cards: Scryfall printings, in catalog order
            lands_cards: 17Lands cards

        Returns:
            One MergedCard per 17Lands card, in the same order.
        """
        logger.debug("Starting card merge process...")
        stats = MergeStats(total=len(lands_cards))
        stats.duplicate_arena_ids = find_duplicate_arena_ids([c.arena_id for c in lands_cards])
        _log_duplicates(stats.duplicate_arena_ids, "17lands")

        indexes = build_indexes(scryfall_cards)
        created_at = datetime.now(UTC)
        merged: list[MergedCard] = []

        for lands_card in lands_cards:
            result = find_best_match(lands_card, indexes, self._config)
            stats.by_match_type[result.match_type.value] += 1

            if result.card is not None:
                merged.append(create_merged_card(result.card, lands_card, created_at))
                stats.both += 1
            else:
                merged.append(create_lands_only_card(lands_card, self._config, created_at))
                stats.primary_only += 1
                if lands_card.name in self._config.token_names:
                    stats.unmatched_tokens += 1
                else:
                    logger.debug(
                        "No Scryfall match for %s (%s, arena_id=%d)",
                        lands_card.name,
                        lands_card.expansion,
                        lands_card.arena_id,
                    )

        _log_duplicates(find_duplicate_arena_ids([c.arena_id for c in merged]), "merged")

        logger.info(
            "merge_complete",
            extra={
                "total": len(merged),
                "both": stats.both,
                "enhanced_matches": stats.enhanced_matches,
                "primary_only": stats.primary_only,
                "unmatched_tokens": stats.unmatched_tokens,
                "by_match_type": dict(stats.by_match_type),
            },
        )
        logger.info(
            "Merge stats: %d both sources, 0 Scryfall only, %d 17Lands only",
            stats.both,
            stats.primary_only,
        )

        self.last_stats = stats
        return merged


def merge_cards(
    scryfall_cards: Sequence[ScryfallCard],
    lands_cards: Sequence[LandsCard],
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> list[MergedCard]:
    """Merge both catalogs with a one-off CardMerger."""
    return CardMerger(config).merge(scryfall_cards, lands_cards)
