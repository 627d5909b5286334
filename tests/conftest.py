from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest

from arenacards.models.card import CardSource, LandsCard, MergedCard, ScryfallCard


@pytest.fixture
def make_scryfall_card() -> Callable[..., ScryfallCard]:
    """Factory for Scryfall printings with sensible defaults."""
    counter = iter(range(1, 10_000))

    def _make(name: str, set_code: str = "m10", **kwargs: Any) -> ScryfallCard:
        kwargs.setdefault("id", f"scry-{next(counter)}")
        return ScryfallCard(name=name, set=set_code, **kwargs)

    return _make


@pytest.fixture
def make_lands_card() -> Callable[..., LandsCard]:
    """Factory for 17Lands cards with sensible defaults."""

    def _make(
        name: str,
        expansion: str = "M10",
        arena_id: int = 1000,
        rarity: str = "common",
        **kwargs: Any,
    ) -> LandsCard:
        return LandsCard(
            arena_id=arena_id, name=name, expansion=expansion, rarity=rarity, **kwargs
        )

    return _make


@pytest.fixture
def sample_bulk_data() -> list[dict[str, Any]]:
    """Scryfall bulk data objects as they appear in default-cards JSON."""
    return [
        {
            "id": "9ea8179a-d3c9-4cdc-a5b5-68cc73279050",
            "name": "Fireball",
            "set": "m10",
            "set_name": "Magic 2010",
            "arena_id": None,
            "mana_cost": "{X}{R}",
            "cmc": 1.0,
            "type_line": "Sorcery",
            "oracle_text": "Fireball deals X damage divided as you choose...",
            "colors": ["R"],
            "color_identity": ["R"],
            "keywords": [],
            "rarity": "uncommon",
            "collector_number": "136",
            "artist": "Dave Dorman",
            "prices": {"usd": "0.25", "usd_foil": "1.50"},
            "image_uris": {
                "normal": "https://cards.scryfall.io/normal/fireball.jpg",
                "large": "https://cards.scryfall.io/large/fireball.jpg",
            },
            "scryfall_uri": "https://scryfall.com/card/m10/136/fireball",
            "legalities": {"standard": "not_legal", "modern": "legal", "commander": "legal"},
            "digital": False,
            "foil": True,
            "nonfoil": True,
        },
        {
            "id": "b7ef6a28-0d55-4e28-a2a4-c6e4b5c5d1b0",
            "name": "Delver of Secrets // Insectile Aberration",
            "set": "isd",
            "arena_id": 78001,
            "cmc": 1.0,
            "type_line": "Creature — Human Wizard // Creature — Human Insect",
            "rarity": "common",
            "prices": {"usd": None, "usd_foil": None},
            "card_faces": [
                {"name": "Delver of Secrets", "image_uris": {"normal": "front.jpg"}},
                {"name": "Insectile Aberration", "image_uris": {"normal": "back.jpg"}},
            ],
        },
        {
            "id": "broken-record",
            "set": "xyz",
        },
    ]


@pytest.fixture
def make_merged_card() -> Callable[..., MergedCard]:
    """Factory for merged cards keyed by set code and Arena ID."""

    def _make(
        name: str,
        set_code: str = "m10",
        arena_id: int = 1000,
        source: CardSource = CardSource.BOTH,
        **kwargs: Any,
    ) -> MergedCard:
        kwargs.setdefault("rarity", "common")
        kwargs.setdefault("is_booster", True)
        kwargs.setdefault("created_at", datetime(2025, 1, 1, 12, 0, tzinfo=UTC))
        return MergedCard(
            id=f"{set_code}_{arena_id}",
            arena_id=arena_id,
            name=name,
            set_code=set_code,
            source=source,
            **kwargs,
        )

    return _make
