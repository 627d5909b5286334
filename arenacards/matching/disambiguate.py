"""Pick one Scryfall printing when several share a name."""

from collections.abc import Sequence

from arenacards.config import DEFAULT_MATCH_CONFIG, MatchConfig
from arenacards.models.card import LandsCard, ScryfallCard


def select_best_candidate(
    candidates: Sequence[ScryfallCard],
    lands_card: LandsCard,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
) -> ScryfallCard | None:
    """
    Choose the printing a 17Lands card should be merged with.

    Rules, first decisive rule wins:
    1. A lone candidate is returned as-is.
    2. If exactly one candidate has an Arena ID, prefer it.
    3. Otherwise the first candidate outside the supplemental sets.
    4. Otherwise the first candidate.

    Order-sensitive and deterministic. `lands_card` is accepted for context
    but does not influence the choice.

    Returns:
        The chosen printing, or None for an empty candidate list.
    """
    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]

    with_arena_id = [c for c in candidates if c.arena_id is not None]
    if len(with_arena_id) == 1:
        return with_arena_id[0]

    for candidate in candidates:
        if not config.is_supplemental(candidate.set):
            return candidate

    return candidates[0]
