from arenacards.models.card import CardSource, LandsCard, MergedCard, ScryfallCard

__all__ = [
    "CardSource",
    "LandsCard",
    "MergedCard",
    "ScryfallCard",
]
