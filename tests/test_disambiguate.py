"""Tests for choosing one printing among same-named candidates."""

import itertools

import pytest

from arenacards.config import MatchConfig
from arenacards.matching.disambiguate import select_best_candidate


@pytest.fixture
def lands_card(make_lands_card):
    return make_lands_card("Shock")


class TestSelectBestCandidate:
    def test_empty_returns_none(self, lands_card) -> None:
        assert select_best_candidate([], lands_card) is None

    def test_single_candidate_returned(self, make_scryfall_card, lands_card) -> None:
        only = make_scryfall_card("Shock", "sld")

        assert select_best_candidate([only], lands_card) is only

    def test_prefers_single_arena_printing(self, make_scryfall_card, lands_card) -> None:
        paper = make_scryfall_card("Shock", "m19")
        arena = make_scryfall_card("Shock", "m20", arena_id=68000)
        promo = make_scryfall_card("Shock", "sld")

        for order in itertools.permutations([paper, arena, promo]):
            assert select_best_candidate(list(order), lands_card) is arena

    def test_skips_supplemental_sets(self, make_scryfall_card, lands_card) -> None:
        secret_lair = make_scryfall_card("Shock", "SLD")
        the_list = make_scryfall_card("Shock", "plst")
        core = make_scryfall_card("Shock", "m19")

        assert select_best_candidate([secret_lair, the_list, core], lands_card) is core

    def test_supplemental_filter_applies_when_several_have_arena_ids(
        self, make_scryfall_card, lands_card
    ) -> None:
        secret_lair = make_scryfall_card("Shock", "sld", arena_id=1)
        core = make_scryfall_card("Shock", "m19", arena_id=2)

        assert select_best_candidate([secret_lair, core], lands_card) is core

    def test_falls_back_to_first_candidate(self, make_scryfall_card, lands_card) -> None:
        first = make_scryfall_card("Shock", "sld")
        second = make_scryfall_card("Shock", "mb1")

        assert select_best_candidate([first, second], lands_card) is first

    def test_uses_configured_denylist(self, make_scryfall_card, lands_card) -> None:
        config = MatchConfig(supplemental_sets=frozenset({"m19"}))
        m19 = make_scryfall_card("Shock", "m19")
        sld = make_scryfall_card("Shock", "sld")

        assert select_best_candidate([m19, sld], lands_card, config) is sld

    def test_deterministic(self, make_scryfall_card, lands_card) -> None:
        candidates = [make_scryfall_card("Shock", code) for code in ("sld", "m19", "m20")]

        results = {id(select_best_candidate(candidates, lands_card)) for _ in range(5)}

        assert len(results) == 1
