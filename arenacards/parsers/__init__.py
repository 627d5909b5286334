from arenacards.parsers.lands import load_lands_cards, parse_lands_frame, parse_lands_row
from arenacards.parsers.scryfall import (
    load_scryfall_cards,
    parse_scryfall_card,
    parse_scryfall_cards,
)

__all__ = [
    "load_lands_cards",
    "load_scryfall_cards",
    "parse_lands_frame",
    "parse_lands_row",
    "parse_scryfall_card",
    "parse_scryfall_cards",
]
