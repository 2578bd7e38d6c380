from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, condecimal

from arena_api.modules.paging import PageOut

# beasts.entertainment_value is NUMERIC(5,2)
Rating = condecimal(max_digits=5, decimal_places=2)


class BeastCreateIn(BaseModel):
    event_id: int
    species: str
    count: int
    strength: Optional[int] = None
    speed: Optional[int] = None
    entertainment_value: Optional[Rating] = None


class BeastPatchIn(BaseModel):
    event_id: Optional[int] = None
    species: Optional[str] = None
    count: Optional[int] = None
    strength: Optional[int] = None
    speed: Optional[int] = None
    entertainment_value: Optional[Rating] = None


class BeastOut(BaseModel):
    id: int
    event_id: int
    species: str
    count: int
    strength: Optional[int] = None
    speed: Optional[int] = None
    entertainment_value: Optional[Decimal] = None


class BeastsListOut(BaseModel):
    items: List[BeastOut]
    page: PageOut
