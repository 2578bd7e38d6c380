from __future__ import annotations

from datetime import date
from typing import Optional
from sqlmodel import SQLModel, Field


# PRAGMA foreign_keys=ON per connection (core.db) makes the cascade effective
class Event(SQLModel, table=True):
    __tablename__ = "events"

    id: Optional[int] = Field(default=None, primary_key=True)
    arena_id: int = Field(foreign_key="arenas.id", ondelete="CASCADE", index=True)
    event_date: date
    event_type: str = Field(max_length=100)  # free-form label, e.g. "бой с варварами"
