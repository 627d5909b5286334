from arenacards.matching.disambiguate import select_best_candidate
from arenacards.matching.indexes import CardIndexes, IndexStats, build_indexes, name_set_key
from arenacards.matching.normalize import normalize_name
from arenacards.matching.resolver import (
    MATCH_STRATEGIES,
    MatchResult,
    MatchType,
    find_best_match,
)

__all__ = [
    "MATCH_STRATEGIES",
    "CardIndexes",
    "IndexStats",
    "MatchResult",
    "MatchType",
    "build_indexes",
    "find_best_match",
    "name_set_key",
    "normalize_name",
    "select_best_candidate",
]
