from __future__ import annotations

from decimal import Decimal
from typing import Optional
from sqlalchemy import CheckConstraint, Index
from sqlmodel import SQLModel, Field

# locked enumerations (CHECK constraints in migration)
PARTICIPANT_TYPES = (
    "gladiator",
    "retiarius",
    "barbarian",
    "victim",
    "archer",
    "legionary",
    "phalanx",
    "slinger",
    "charioteer",
    "auriga",
    "chariot-owner",
)
STRENGTH_LEVELS = ("novice", "experienced", "veteran")


def _in_list(column: str, values) -> str:
    return f"{column} IN (" + ", ".join(f"'{v}'" for v in values) + ")"


# count also guarded by triggers (migration 0001)
class Participant(SQLModel, table=True):
    __tablename__ = "participants"
    __table_args__ = (
        # non-unique: plain inserts may add rows for an existing pair
        Index("ix_participants_event_id_type", "event_id", "type"),
        CheckConstraint(_in_list("type", PARTICIPANT_TYPES), name="ck_participants_type"),
        CheckConstraint(_in_list("strength_level", STRENGTH_LEVELS), name="ck_participants_strength_level"),
        CheckConstraint("count >= 0", name="ck_participants_count"),
        CheckConstraint("cost >= 0", name="ck_participants_cost"),
        CheckConstraint("age >= 0", name="ck_participants_age"),
        CheckConstraint("battles_count >= 0", name="ck_participants_battles_count"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    event_id: int = Field(foreign_key="events.id", ondelete="CASCADE")
    type: str = Field(max_length=50)
    count: int
    strength_level: Optional[str] = Field(default=None, max_length=50)
    cost: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    age: Optional[int] = Field(default=None)
    battles_count: Optional[int] = Field(default=None)
