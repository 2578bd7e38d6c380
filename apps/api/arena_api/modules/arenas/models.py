from __future__ import annotations

from typing import Optional
from sqlalchemy import CheckConstraint
from sqlmodel import SQLModel, Field


class Arena(SQLModel, table=True):
    __tablename__ = "arenas"
    __table_args__ = (CheckConstraint("capacity > 0", name="ck_arenas_capacity_positive"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    city: str = Field(max_length=100)
    capacity: int
