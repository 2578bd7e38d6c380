from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from arena_api.modules.paging import PageOut


class ArenaCreateIn(BaseModel):
    name: str
    city: str
    capacity: int


class ArenaPatchIn(BaseModel):
    name: Optional[str] = None
    city: Optional[str] = None
    capacity: Optional[int] = None


class ArenaOut(BaseModel):
    id: int
    name: str
    city: str
    capacity: int


class ArenasListOut(BaseModel):
    items: List[ArenaOut]
    page: PageOut
