"""
SQLAlchemy ORM models for persistent storage.

Models mirror the dataclass models but add database persistence.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from arenacards.models.card import CardSource, MergedCard


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class MergedCardDB(Base):
    """
    A merged card row.

    The composite id (set code + Arena ID) is the primary key, so writing a
    card twice replaces the earlier row.
    """

    __tablename__ = "cards"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    arena_id: Mapped[int] = mapped_column(Integer, index=True)
    name: Mapped[str] = mapped_column(String(255), index=True)
    mana_cost: Mapped[str | None] = mapped_column(String(255), nullable=True)
    cmc: Mapped[float | None] = mapped_column(Float, nullable=True)
    type_line: Mapped[str | None] = mapped_column(String(255), nullable=True)
    oracle_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    colors: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    color_identity: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    keywords: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)

    set_code: Mapped[str] = mapped_column(String(32), index=True)
    set_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    rarity: Mapped[str] = mapped_column(String(32), index=True)
    collector_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    artist: Mapped[str | None] = mapped_column(String(255), nullable=True)
    flavor_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    prices_usd: Mapped[float | None] = mapped_column(Float, nullable=True)
    prices_usd_foil: Mapped[float | None] = mapped_column(Float, nullable=True)

    image_uri_normal: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_uri_large: Mapped[str | None] = mapped_column(Text, nullable=True)
    scryfall_uri: Mapped[str | None] = mapped_column(Text, nullable=True)

    legalities_standard: Mapped[str | None] = mapped_column(String(32), nullable=True)
    legalities_modern: Mapped[str | None] = mapped_column(String(32), nullable=True)
    legalities_commander: Mapped[str | None] = mapped_column(String(32), nullable=True)

    digital: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    foil: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    nonfoil: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    is_booster: Mapped[bool] = mapped_column(Boolean, index=True)
    source: Mapped[str] = mapped_column(String(32), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    def __repr__(self) -> str:
        return f"<MergedCardDB(id={self.id}, name={self.name})>"

    @classmethod
    def from_card(cls, card: MergedCard) -> "MergedCardDB":
        values: dict[str, Any] = card.to_dict()
        values["created_at"] = card.created_at
        return cls(**values)

    def to_card(self) -> MergedCard:
        return MergedCard(
            id=self.id,
            arena_id=self.arena_id,
            name=self.name,
            set_code=self.set_code,
            rarity=self.rarity,
            is_booster=self.is_booster,
            source=CardSource(self.source),
            created_at=self.created_at,
            mana_cost=self.mana_cost,
            cmc=self.cmc,
            type_line=self.type_line,
            oracle_text=self.oracle_text,
            colors=tuple(self.colors) if self.colors is not None else None,
            color_identity=(
                tuple(self.color_identity) if self.color_identity is not None else None
            ),
            keywords=tuple(self.keywords) if self.keywords is not None else None,
            set_name=self.set_name,
            collector_number=self.collector_number,
            artist=self.artist,
            flavor_text=self.flavor_text,
            prices_usd=self.prices_usd,
            prices_usd_foil=self.prices_usd_foil,
            image_uri_normal=self.image_uri_normal,
            image_uri_large=self.image_uri_large,
            scryfall_uri=self.scryfall_uri,
            legalities_standard=self.legalities_standard,
            legalities_modern=self.legalities_modern,
            legalities_commander=self.legalities_commander,
            digital=self.digital,
            foil=self.foil,
            nonfoil=self.nonfoil,
        )
