"""
Scryfall bulk data parser.

Turns Scryfall's default-cards bulk JSON into ScryfallCard records.

Bulk data: https://scryfall.com/docs/api/bulk-data
"""

import json
import logging
from pathlib import Path
from typing import Any

from arenacards.errors import CardDataError
from arenacards.models.card import ScryfallCard

logger = logging.getLogger(__name__)


def _parse_price(value: Any) -> float | None:
    """Scryfall prices are decimal strings or null."""
    if value in (None, ""):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_tuple(value: Any) -> tuple[str, ...] | None:
    if value is None:
        return None
    return tuple(value)


def _image_uris(card: dict[str, Any]) -> dict[str, str]:
    """
    Image URIs for a printing.

    Double-faced cards have no top-level image_uris; use the front face.
    """
    if card.get("image_uris"):
        return dict(card["image_uris"])
    faces = card.get("card_faces") or []
    if faces and faces[0].get("image_uris"):
        return dict(faces[0]["image_uris"])
    return {}


def parse_scryfall_card(card: dict[str, Any]) -> ScryfallCard:
    """
    Convert one bulk data object into a ScryfallCard.

    Missing fields become None. Missing name or set become empty strings;
    such records are skipped later, when the indexes are built.
    """
    prices = card.get("prices") or {}
    images = _image_uris(card)
    legalities = card.get("legalities")

    return ScryfallCard(
        id=str(card.get("id", "")),
        name=card.get("name") or "",
        set=card.get("set") or "",
        arena_id=card.get("arena_id"),
        mana_cost=card.get("mana_cost"),
        cmc=card.get("cmc"),
        type_line=card.get("type_line"),
        oracle_text=card.get("oracle_text"),
        colors=_as_tuple(card.get("colors")),
        color_identity=_as_tuple(card.get("color_identity")),
        keywords=_as_tuple(card.get("keywords")),
        set_name=card.get("set_name"),
        rarity=card.get("rarity"),
        collector_number=card.get("collector_number"),
        artist=card.get("artist"),
        flavor_text=card.get("flavor_text"),
        prices_usd=_parse_price(prices.get("usd")),
        prices_usd_foil=_parse_price(prices.get("usd_foil")),
        image_uri_normal=images.get("normal"),
        image_uri_large=images.get("large"),
        scryfall_uri=card.get("scryfall_uri"),
        legalities=dict(legalities) if legalities is not None else None,
        digital=card.get("digital"),
        foil=card.get("foil"),
        nonfoil=card.get("nonfoil"),
    )


def parse_scryfall_cards(data: Any) -> list[ScryfallCard]:
    """
    Parse a decoded bulk data payload.

    Raises:
        CardDataError: If the payload is not a JSON array
    """
    if not isinstance(data, list):
        raise CardDataError("Expected JSON array from Scryfall bulk data")
    return [parse_scryfall_card(card) for card in data if isinstance(card, dict)]


def load_scryfall_cards(bulk_data_path: Path) -> list[ScryfallCard]:
    """
    Load Scryfall printings from a downloaded bulk JSON file.

    Args:
        bulk_data_path: Path to downloaded Scryfall bulk JSON

    Returns:
        Printings in file order

    Raises:
        CardDataError: If the file is not valid JSON or not an array
    """
    with open(bulk_data_path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise CardDataError(f"Invalid Scryfall JSON in {bulk_data_path}: {e}") from e

    cards = parse_scryfall_cards(data)
    logger.debug("Parsed %d Scryfall cards from %s", len(cards), bulk_data_path)
    return cards
