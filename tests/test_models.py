"""Tests for card record models."""

import dataclasses
from datetime import UTC, datetime

import pytest

from arenacards.models.card import CardSource, LandsCard, MergedCard


class TestCardSource:
    def test_values(self) -> None:
        assert [source.value for source in CardSource] == [
            "both",
            "primary_only",
            "secondary_only",
        ]

    def test_compares_to_string(self) -> None:
        assert CardSource("primary_only") is CardSource.PRIMARY_ONLY
        assert CardSource.BOTH == "both"


class TestLandsCard:
    def test_defaults(self) -> None:
        card = LandsCard(arena_id=1, name="Opt", expansion="XLN", rarity="common")

        assert card.color_identity == ""
        assert card.mana_value == 0.0
        assert card.is_booster is False

    def test_frozen(self) -> None:
        card = LandsCard(arena_id=1, name="Opt", expansion="XLN", rarity="common")

        with pytest.raises(dataclasses.FrozenInstanceError):
            card.name = "Shock"  # type: ignore[misc]


class TestMergedCard:
    def test_to_dict_is_json_friendly(self, make_merged_card) -> None:
        card = make_merged_card("Fireball", colors=("R",), keywords=())

        data = card.to_dict()

        assert data["id"] == "m10_1000"
        assert data["source"] == "both"
        assert data["colors"] == ["R"]
        assert data["keywords"] == []
        assert data["color_identity"] is None
        assert data["created_at"] == "2025-01-01T12:00:00+00:00"

    def test_from_dict_restores_card(self, make_merged_card) -> None:
        card = make_merged_card(
            "Fireball",
            source=CardSource.PRIMARY_ONLY,
            colors=("R",),
            color_identity=("R",),
            prices_usd=0.25,
        )

        assert MergedCard.from_dict(card.to_dict()) == card

    def test_from_dict_requires_identity(self, make_merged_card) -> None:
        data = make_merged_card("Fireball").to_dict()
        del data["arena_id"]

        with pytest.raises(TypeError):
            MergedCard.from_dict(data)

    def test_from_dict_rejects_unknown_source(self, make_merged_card) -> None:
        data = make_merged_card("Fireball").to_dict()
        data["source"] = "tertiary"

        with pytest.raises(ValueError):
            MergedCard.from_dict(data)

    def test_frozen(self, make_merged_card) -> None:
        card = make_merged_card("Fireball")

        with pytest.raises(dataclasses.FrozenInstanceError):
            card.rarity = "rare"  # type: ignore[misc]

    def test_created_at_keeps_timezone(self, make_merged_card) -> None:
        when = datetime(2025, 6, 1, tzinfo=UTC)

        restored = MergedCard.from_dict(make_merged_card("Opt", created_at=when).to_dict())

        assert restored.created_at == when
        assert restored.created_at.tzinfo is not None
