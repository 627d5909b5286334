from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ARENACARDS_")

    debug: bool = False

    # None resolves the latest default_cards bulk file via the Scryfall API
    scryfall_url: str | None = None
    lands_url: str = "https://17lands-public.s3.amazonaws.com/analysis_data/cards/cards.csv"

    cache_dir: Path = Path("cache")
    output_file: Path = Path("mtg_cards.jsonl")

    database_url: str = "sqlite+aiosqlite:///mtg_cards.db"

    http_timeout: float = 300.0
    user_agent: str = "arenacards/1.0"


settings = Settings()


# =============================================================================
# MATCHING CONFIGURATION
# =============================================================================

# Split, adventure and MDFC names in Scryfall join their halves with this
SPLIT_SEPARATOR = " // "

# Prefix Arena uses for rebalanced (Alchemy) versions of a card
DIGITAL_VARIANT_PREFIX = "A-"

COLOR_LETTERS = ("W", "U", "B", "R", "G")


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """
    Static lookup tables consulted while matching 17Lands cards to Scryfall.

    Built once and passed explicitly to the resolver, disambiguator and merger.

    Attributes:
        digital_only_sets: Expansion codes that exist only on Arena
        supplemental_sets: Scryfall set codes deprioritized when several
            printings share a name
        transform_suffixes_appended: Back-face suffixes tried by appending
            them to a 17Lands name
        transform_suffixes_stripped: Back-face suffixes tried by removing
            them from the end of a 17Lands name
        token_names: Generated token names that never match a real card
        digital_set_names: Display names for digital-only expansions
    """

    digital_only_sets: frozenset[str] = frozenset(
        {
            "y22", "y23", "y24", "y25",
            "ymid", "yvow", "ysnc", "yneo", "ydmu", "ybro", "yotj", "ylci",
            "hbg", "fin", "arenasup",
        }
    )  # fmt: skip
    supplemental_sets: frozenset[str] = frozenset(
        {"sld", "plst", "plist", "mb1", "mb2", "akh", "hou"}
    )
    transform_suffixes_appended: tuple[str, ...] = (
        ", the Radiant Dawn",
        ", the Warped Eclipse",
    )
    transform_suffixes_stripped: tuple[str, ...] = (
        ", the Radiant Dawn",
        ", the Warped Eclipse",
        ", the Moon's Fury",
        ", the Midnight Scourge",
        ", Infernal Seer",
        ", Cosmic Impostor",
        ", Lord of the Deep",
        ", Primal Sickness",
    )
    token_names: frozenset[str] = frozenset(
        {
            "Treasure", "Food", "Clue", "Gold", "Blood", "Map",
            "Angel", "Zombie", "Spirit", "Elemental", "Goblin", "Thopter",
            "Soldier", "Knight", "Beast", "Cat", "Wolf", "Snake", "Insect",
            "Human", "Warrior", "Saproling", "Spider",
        }
    )  # fmt: skip
    digital_set_names: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(
            {
                "y22": "Alchemy: Innistrad",
                "y23": "Alchemy: The Brothers' War",
                "y24": "Alchemy: Wilds of Eldraine",
                "y25": "Alchemy: Foundations",
                "ymid": "Alchemy: Midnight Hunt",
                "yvow": "Alchemy: Crimson Vow",
                "ysnc": "Alchemy: Streets of New Capenna",
                "yneo": "Alchemy: Kamigawa",
                "ydmu": "Alchemy: Dominaria United",
                "ybro": "Alchemy: The Brothers' War",
                "yotj": "Alchemy: Outlaws of Thunder Junction",
                "ylci": "Alchemy: Lost Caverns of Ixalan",
                "fin": "Final Fantasy",
                "arenasup": "Arena Supplemental",
                "tj25": "Timeless Jump-In",
                "hbg": "Alchemy Horizons: Baldur's Gate",
            }
        )
    )

    def is_digital_only(self, expansion: str) -> bool:
        return expansion.lower() in self.digital_only_sets

    def is_supplemental(self, set_code: str) -> bool:
        return set_code.lower() in self.supplemental_sets


DEFAULT_MATCH_CONFIG = MatchConfig()
