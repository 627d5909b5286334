from arenacards.services.card_merger import (
    CardMerger,
    MergeStats,
    composite_id,
    create_lands_only_card,
    create_merged_card,
    merge_cards,
    parse_color_identity,
)
from arenacards.services.summary import CollectionSummary, format_summary, summarize

__all__ = [
    "CardMerger",
    "CollectionSummary",
    "MergeStats",
    "composite_id",
    "create_lands_only_card",
    "create_merged_card",
    "format_summary",
    "merge_cards",
    "parse_color_identity",
    "summarize",
]
