from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel

from arena_api.modules.paging import PageOut


class EventCreateIn(BaseModel):
    arena_id: int
    event_date: date
    event_type: str


class EventPatchIn(BaseModel):
    arena_id: Optional[int] = None
    event_date: Optional[date] = None
    event_type: Optional[str] = None


class EventOut(BaseModel):
    id: int
    arena_id: int
    event_date: date
    event_type: str


class EventsListOut(BaseModel):
    items: List[EventOut]
    page: PageOut


class EventDeleteOut(BaseModel):
    event_id: int
    deleted: bool
    status: str = "ok"
