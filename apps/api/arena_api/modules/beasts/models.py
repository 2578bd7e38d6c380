from __future__ import annotations

from decimal import Decimal
from typing import Optional
from sqlalchemy import CheckConstraint, Index
from sqlmodel import SQLModel, Field

BEAST_SPECIES = ("lion", "leopard", "jackal", "baboon")


class Beast(SQLModel, table=True):
    __tablename__ = "beasts"
    __table_args__ = (
        Index("ix_beasts_event_id_species", "event_id", "species"),
        CheckConstraint(
            "species IN (" + ", ".join(f"'{s}'" for s in BEAST_SPECIES) + ")",
            name="ck_beasts_species",
        ),
        CheckConstraint("count >= 0", name="ck_beasts_count"),
        CheckConstraint("strength >= 0", name="ck_beasts_strength"),
        CheckConstraint("speed >= 0", name="ck_beasts_speed"),
        CheckConstraint("entertainment_value >= 0", name="ck_beasts_entertainment_value"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    event_id: int = Field(foreign_key="events.id", ondelete="CASCADE")
    species: str = Field(max_length=50)
    count: int
    strength: Optional[int] = Field(default=None)
    speed: Optional[int] = Field(default=None)
    entertainment_value: Optional[Decimal] = Field(default=None, max_digits=5, decimal_places=2)
