"""Collection summaries for the info command and post-collect report."""

import json
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from arenacards.models.card import MergedCard

TOP_SETS_LIMIT = 10


@dataclass
class CollectionSummary:
    """Aggregate counts over a merged card collection."""

    total: int = 0
    by_source: dict[str, int] = field(default_factory=dict)
    top_sets: list[tuple[str, str | None, int]] = field(default_factory=list)
    """(set_code, set_name, count), largest sets first."""
    by_rarity: dict[str, int] = field(default_factory=dict)
    with_arena_id: int = 0


def summarize(cards: Iterable[MergedCard]) -> CollectionSummary:
    """Summarize merged cards held in memory (e.g. read from JSONL)."""
    sources: Counter[str] = Counter()
    sets: Counter[str] = Counter()
    set_names: dict[str, str | None] = {}
    rarities: Counter[str] = Counter()
    total = 0
    with_arena_id = 0

    for card in cards:
        total += 1
        sources[card.source.value] += 1
        sets[card.set_code] += 1
        if not set_names.get(card.set_code):
            set_names[card.set_code] = card.set_name
        rarities[card.rarity] += 1
        if card.arena_id is not None:
            with_arena_id += 1

    top_sets = sorted(sets.items(), key=lambda item: (-item[1], item[0]))[:TOP_SETS_LIMIT]
    return CollectionSummary(
        total=total,
        by_source=dict(sources.most_common()),
        top_sets=[(code, set_names[code], n) for code, n in top_sets],
        by_rarity=dict(rarities.most_common()),
        with_arena_id=with_arena_id,
    )


def format_summary(summary: CollectionSummary) -> list[str]:
    """Render a summary as report lines."""
    lines = ["Total Cards:", f"  {json.dumps({'total': summary.total})}"]

    lines.append("Cards by Source:")
    lines.extend(
        f"  {json.dumps({'source': source, 'count': n})}" for source, n in summary.by_source.items()
    )

    lines.append(f"Cards by Set (Top {TOP_SETS_LIMIT}):")
    lines.extend(
        f"  {json.dumps({'set_code': code, 'set_name': name, 'count': n})}"
        for code, name, n in summary.top_sets
    )

    lines.append("Cards by Rarity:")
    lines.extend(
        f"  {json.dumps({'rarity': rarity, 'count': n})}" for rarity, n in summary.by_rarity.items()
    )

    lines.append("Arena ID Coverage:")
    lines.append(f"  {json.dumps({'with_arena_id': summary.with_arena_id})}")
    return lines
