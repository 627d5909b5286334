"""
Match cascade: find the Scryfall printing for a 17Lands card.

Strategies run in a fixed priority order and the first hit wins:

1. exact          name + set
2. arena_id       Arena ID (reprints under another set code)
3. split_card     one half of a "Left // Right" card
4. transform_card one face of a transform/MDFC card
5. name_cross_set exact name in any set
6. normalized     name after case/punctuation normalization
7. digital_original
                  original printing of an Arena-only card
8. none

Every strategy is a plain function over the read-only indexes.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from arenacards.config import (
    DEFAULT_MATCH_CONFIG,
    DIGITAL_VARIANT_PREFIX,
    SPLIT_SEPARATOR,
    MatchConfig,
)
from arenacards.matching.disambiguate import select_best_candidate
from arenacards.matching.indexes import CardIndexes, name_set_key
from arenacards.matching.normalize import normalize_name
from arenacards.models.card import LandsCard, ScryfallCard


class MatchType(str, Enum):
    """Which strategy produced a match."""

    EXACT = "exact"
    ARENA_ID = "arena_id"
    SPLIT_CARD = "split_card"
    TRANSFORM_CARD = "transform_card"
    NAME_CROSS_SET = "name_cross_set"
    NORMALIZED = "normalized"
    DIGITAL_ORIGINAL = "digital_original"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of resolving one 17Lands card."""

    card: ScryfallCard | None
    match_type: MatchType

    @property
    def matched(self) -> bool:
        return self.card is not None


Strategy = Callable[[LandsCard, CardIndexes, MatchConfig], ScryfallCard | None]


def _best_by_name(
    name: str, lands_card: LandsCard, indexes: CardIndexes, config: MatchConfig
) -> ScryfallCard | None:
    candidates = indexes.by_name.get(name)
    if not candidates:
        return None
    return select_best_candidate(candidates, lands_card, config)


def match_exact(
    lands_card: LandsCard, indexes: CardIndexes, config: MatchConfig
) -> ScryfallCard | None:
    return indexes.by_name_set.get(name_set_key(lands_card.name, lands_card.expansion))


def match_arena_id(
    lands_card: LandsCard, indexes: CardIndexes, config: MatchConfig
) -> ScryfallCard | None:
    if not lands_card.arena_id:
        return None
    return indexes.by_arena_id.get(lands_card.arena_id)


def match_split_card(
    lands_card: LandsCard, indexes: CardIndexes, config: MatchConfig
) -> ScryfallCard | None:
    """
    Match a 17Lands name against either half of a split card.

    Example: "Swift End" matches "Murderous Rider // Swift End".
    """
    for full_name, candidates in indexes.by_name.items():
        if SPLIT_SEPARATOR not in full_name:
            continue
        halves = (part.strip() for part in full_name.split(SPLIT_SEPARATOR))
        if lands_card.name in halves:
            return select_best_candidate(candidates, lands_card, config)
    return None


def _transform_name_variants(name: str, config: MatchConfig) -> list[str]:
    variants = [f"{name}{suffix}" for suffix in config.transform_suffixes_appended]
    variants.extend(
        name[: -len(suffix)]
        for suffix in config.transform_suffixes_stripped
        if name.endswith(suffix)
    )
    return [variant for variant in variants if variant and variant != name]


def match_transform_card(
    lands_card: LandsCard, indexes: CardIndexes, config: MatchConfig
) -> ScryfallCard | None:
    """
    Match one face of a transform or modal double-faced card.

    Tries the curated back-face suffixes first, then falls back to any
    Scryfall name sharing the part before the first comma.
    """
    for variant in _transform_name_variants(lands_card.name, config):
        match = _best_by_name(variant, lands_card, indexes, config)
        if match is not None:
            return match

    base_name = lands_card.name.split(",")[0].strip()
    for full_name, candidates in indexes.by_name.items():
        if full_name.startswith(base_name) and full_name != lands_card.name:
            return select_best_candidate(candidates, lands_card, config)
    return None


def match_name_cross_set(
    lands_card: LandsCard, indexes: CardIndexes, config: MatchConfig
) -> ScryfallCard | None:
    return _best_by_name(lands_card.name, lands_card, indexes, config)


def match_normalized(
    lands_card: LandsCard, indexes: CardIndexes, config: MatchConfig
) -> ScryfallCard | None:
    candidates = indexes.by_normalized_name.get(normalize_name(lands_card.name))
    if not candidates:
        return None
    return select_best_candidate(candidates, lands_card, config)


def match_digital_original(
    lands_card: LandsCard, indexes: CardIndexes, config: MatchConfig
) -> ScryfallCard | None:
    """Map an Arena-only printing (e.g. "A-Luminarch Aspirant") to its original."""
    if not config.is_digital_only(lands_card.expansion):
        return None

    name = lands_card.name
    if name.startswith(DIGITAL_VARIANT_PREFIX):
        name = name[len(DIGITAL_VARIANT_PREFIX) :]
    return _best_by_name(name, lands_card, indexes, config)


MATCH_STRATEGIES: tuple[tuple[MatchType, Strategy], ...] = (
    (MatchType.EXACT, match_exact),
    (MatchType.ARENA_ID, match_arena_id),
    (MatchType.SPLIT_CARD, match_split_card),
    (MatchType.TRANSFORM_CARD, match_transform_card),
    (MatchType.NAME_CROSS_SET, match_name_cross_set),
    (MatchType.NORMALIZED, match_normalized),
    (MatchType.DIGITAL_ORIGINAL, match_digital_original),
)


def find_best_match(
    lands_card: LandsCard,
    indexes: CardIndexes,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> MatchResult:
    """
    Run the match cascade for one 17Lands card.

    Args:
        lands_card: Card to resolve
        indexes: Scryfall indexes from build_indexes
        config: Static matching tables

    Returns:
        MatchResult with the matched printing (or None) and the strategy
        that produced it.
    """
    for match_type, strategy in MATCH_STRATEGIES:
        card = strategy(lands_card, indexes, config)
        if card is not None:
            return MatchResult(card=card, match_type=match_type)
    return MatchResult(card=None, match_type=MatchType.NONE)
