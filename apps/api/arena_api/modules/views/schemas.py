from __future__ import annotations

from datetime import date
from typing import List

from pydantic import BaseModel


class EventDetailsRow(BaseModel):
    event_id: int
    event_date: date
    event_type: str
    arena_name: str
    city: str


class ParticipantsSummaryRow(BaseModel):
    event_id: int
    type: str
    total_count: int


class BeastSummaryRow(BaseModel):
    event_id: int
    species: str
    total_count: int


class EventDetailsOut(BaseModel):
    items: List[EventDetailsRow]


class ParticipantsSummaryOut(BaseModel):
    items: List[ParticipantsSummaryRow]


class BeastSummaryOut(BaseModel):
    items: List[BeastSummaryRow]
