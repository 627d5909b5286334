"""JSON Lines output: one merged card per line."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from arenacards.errors import CardDataError
from arenacards.models.card import MergedCard

logger = logging.getLogger(__name__)


def write_jsonl(cards: Iterable[MergedCard], output_path: Path) -> int:
    """
    Write merged cards to a JSONL file, replacing any existing file.

    Returns:
        Number of cards written
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with open(output_path, "w", encoding="utf-8") as f:
        for card in cards:
            f.write(json.dumps(card.to_dict(), ensure_ascii=False))
            f.write("\n")
            count += 1

    logger.debug("Wrote %d cards to %s", count, output_path)
    return count


def read_jsonl(path: Path) -> list[MergedCard]:
    """
    Read merged cards back from a JSONL file. Blank lines are ignored.

    Raises:
        FileNotFoundError: If the file doesn't exist
        CardDataError: If a line is not a valid merged card
    """
    cards: list[MergedCard] = []
    with open(path, encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                cards.append(MergedCard.from_dict(json.loads(line)))
            except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                raise CardDataError(f"{path}:{line_number}: invalid card record: {e}") from e
    return cards
