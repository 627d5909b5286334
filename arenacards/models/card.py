"""
Card record models.

Three record kinds flow through a collection run:
- LandsCard: one row of the 17Lands card list (authoritative on existence)
- ScryfallCard: one printing from Scryfall bulk data (rich metadata)
- MergedCard: the output record, exactly one per LandsCard

All models are frozen (immutable after construction).
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class CardSource(str, Enum):
    """Which catalogs contributed to a merged card."""

    BOTH = "both"
    PRIMARY_ONLY = "primary_only"
    # Never produced while 17Lands is the authority on which cards exist
    SECONDARY_ONLY = "secondary_only"


@dataclass(frozen=True, slots=True)
class LandsCard:
    """
    A card from the 17Lands card list.

    Attributes:
        arena_id: Arena's internal card ID
        name: Card name as 17Lands spells it
        expansion: Expansion code (e.g., "BLB", "Y24")
        rarity: common, uncommon, rare, mythic (lower-cased)
        color_identity: Raw color string (e.g., "WU"), may be empty
        mana_value: Converted mana cost
        types: Free-text type description
        is_booster: Whether the card is opened in boosters
    """

    arena_id: int
    name: str
    expansion: str
    rarity: str
    color_identity: str = ""
    mana_value: float = 0.0
    types: str = ""
    is_booster: bool = False


@dataclass(frozen=True, slots=True)
class ScryfallCard:
    """
    A single printing from Scryfall bulk data.

    Only `id`, `name` and `set` are guaranteed; everything else is optional
    because Scryfall omits fields that do not apply to a printing.
    """

    id: str
    name: str
    set: str
    arena_id: int | None = None
    mana_cost: str | None = None
    cmc: float | None = None
    type_line: str | None = None
    oracle_text: str | None = None
    colors: tuple[str, ...] | None = None
    color_identity: tuple[str, ...] | None = None
    keywords: tuple[str, ...] | None = None
    set_name: str | None = None
    rarity: str | None = None
    collector_number: str | None = None
    artist: str | None = None
    flavor_text: str | None = None
    prices_usd: float | None = None
    prices_usd_foil: float | None = None
    image_uri_normal: str | None = None
    image_uri_large: str | None = None
    scryfall_uri: str | None = None
    legalities: dict[str, str] | None = None
    digital: bool | None = None
    foil: bool | None = None
    nonfoil: bool | None = None

    def legality(self, format_name: str) -> str | None:
        if not self.legalities:
            return None
        return self.legalities.get(format_name)


@dataclass(frozen=True, slots=True)
class MergedCard:
    """
    Output record of a merge, one per 17Lands card.

    Attributes:
        id: Composite key, lower(expansion) + "_" + arena_id
        arena_id: From 17Lands (ground truth)
        set_code: 17Lands expansion, case preserved (ground truth)
        rarity: From 17Lands, even when Scryfall disagrees
        is_booster: From 17Lands
        source: Which catalogs contributed
        created_at: When the record was produced (UTC)
    """

    id: str
    arena_id: int
    name: str
    set_code: str
    rarity: str
    is_booster: bool
    source: CardSource
    created_at: datetime
    mana_cost: str | None = None
    cmc: float | None = None
    type_line: str | None = None
    oracle_text: str | None = None
    colors: tuple[str, ...] | None = None
    color_identity: tuple[str, ...] | None = None
    keywords: tuple[str, ...] | None = None
    set_name: str | None = None
    collector_number: str | None = None
    artist: str | None = None
    flavor_text: str | None = None
    prices_usd: float | None = None
    prices_usd_foil: float | None = None
    image_uri_normal: str | None = None
    image_uri_large: str | None = None
    scryfall_uri: str | None = None
    legalities_standard: str | None = None
    legalities_modern: str | None = None
    legalities_commander: str | None = None
    digital: bool | None = None
    foil: bool | None = None
    nonfoil: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render as a JSON-serializable dict."""
        data = asdict(self)
        for key in ("colors", "color_identity", "keywords"):
            if data[key] is not None:
                data[key] = list(data[key])
        data["source"] = self.source.value
        data["created_at"] = self.created_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MergedCard":
        """Rebuild a card from `to_dict` output."""
        values = dict(data)
        for key in ("colors", "color_identity", "keywords"):
            if values.get(key) is not None:
                values[key] = tuple(values[key])
        values["source"] = CardSource(values["source"])
        values["created_at"] = datetime.fromisoformat(values["created_at"])
        return cls(**values)
