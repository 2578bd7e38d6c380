from __future__ import annotations

from typing import Optional
from sqlalchemy import CheckConstraint
from sqlmodel import SQLModel, Field


# survived <= matching participant/beast count (SQLite triggers in migration)
class BattleResult(SQLModel, table=True):
    __tablename__ = "battle_results"
    __table_args__ = (CheckConstraint("survived >= 0", name="ck_battle_results_survived"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    event_id: int = Field(foreign_key="events.id", ondelete="CASCADE", index=True)
    participant_type: str = Field(max_length=50)  # free text: participant type or beast species
    survived: int
