"""Load and validate the 17Lands card list.

17Lands publishes every Arena card it tracks as a plain CSV
(analysis_data/cards/cards.csv). Rows that cannot identify a card are
dropped and counted; the rest become LandsCard records.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pandas as pd

from arenacards.errors import CardDataError
from arenacards.models.card import LandsCard

logger = logging.getLogger(__name__)

# Required columns in the 17Lands card list (plus "arena_id" or "id")
REQUIRED_COLUMNS = frozenset(["name", "expansion"])

_ID_COLUMNS = ("arena_id", "id")

_TRUE_VALUES = frozenset(["true", "1"])


def _text(row: Mapping[str, Any], column: str) -> str:
    value = row.get(column)
    if value is None:
        return ""
    return str(value).strip()


def _parse_arena_id(row: Mapping[str, Any]) -> int | None:
    for column in _ID_COLUMNS:
        raw = _text(row, column)
        if raw:
            try:
                return int(float(raw))
            except (ValueError, OverflowError):
                return None
    return None


def _parse_mana_value(raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        return 0.0


def parse_lands_row(row: Mapping[str, Any]) -> LandsCard | None:
    """
    Convert one CSV row into a LandsCard.

    Args:
        row: Column name -> cell value

    Returns:
        LandsCard, or None when the row has no usable Arena ID, name or
        expansion.
    """
    arena_id = _parse_arena_id(row)
    if not arena_id:
        return None

    name = _text(row, "name")
    expansion = _text(row, "expansion")
    if not name or not expansion:
        return None

    return LandsCard(
        arena_id=arena_id,
        name=name,
        expansion=expansion,
        rarity=_text(row, "rarity").lower(),
        color_identity=_text(row, "color_identity"),
        mana_value=_parse_mana_value(_text(row, "mana_value")),
        types=_text(row, "types"),
        is_booster=_text(row, "is_booster").lower() in _TRUE_VALUES,
    )


def validate_schema(df: pd.DataFrame) -> None:
    """Validate that the card list has the columns we need.

    Raises:
        CardDataError: If required columns are missing
    """
    missing = REQUIRED_COLUMNS - set(df.columns)
    if not any(column in df.columns for column in _ID_COLUMNS):
        missing = missing | {"arena_id"}
    if missing:
        raise CardDataError(f"Missing required columns: {sorted(missing)}")


def parse_lands_frame(df: pd.DataFrame) -> list[LandsCard]:
    """Convert a validated card list DataFrame into LandsCards."""
    validate_schema(df)

    cards: list[LandsCard] = []
    skipped = 0
    for row_number, row in enumerate(df.to_dict("records"), start=1):
        card = parse_lands_row(row)
        if card is None:
            skipped += 1
            logger.debug("Row %d: missing arena id, name or expansion", row_number)
            continue
        cards.append(card)

    if skipped:
        logger.info(
            "lands_rows_skipped",
            extra={"total_rows": len(df), "valid": len(cards), "skipped": skipped},
        )
    return cards


def load_lands_cards(file_path: Path) -> list[LandsCard]:
    """Load the 17Lands card list from a CSV file.

    Every column is read as text so ids and codes keep their exact spelling.

    Args:
        file_path: Path to cards.csv

    Returns:
        Valid cards in file order

    Raises:
        CardDataError: If the file cannot be parsed or lacks required columns
    """
    try:
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise CardDataError(f"Cannot parse 17Lands CSV {file_path}: {e}") from e

    cards = parse_lands_frame(df)
    logger.debug("Parsed %d valid cards from %s", len(cards), file_path)
    return cards
