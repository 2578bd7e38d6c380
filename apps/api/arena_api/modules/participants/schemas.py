from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, condecimal

from arena_api.modules.paging import PageOut

# participants.cost is NUMERIC(10,2)
Cost = condecimal(max_digits=10, decimal_places=2)


# Enumerations and non-negativity are enforced by the database (CHECK + triggers);
# DTOs only carry types so every rejection surfaces as constraint_violation.
class ParticipantCreateIn(BaseModel):
    event_id: int
    type: str
    count: int
    strength_level: Optional[str] = None
    cost: Optional[Cost] = None
    age: Optional[int] = None
    battles_count: Optional[int] = None


class ParticipantPatchIn(BaseModel):
    event_id: Optional[int] = None
    type: Optional[str] = None
    count: Optional[int] = None
    strength_level: Optional[str] = None
    cost: Optional[Cost] = None
    age: Optional[int] = None
    battles_count: Optional[int] = None


class ParticipantUpsertIn(BaseModel):
    count: int
    strength_level: Optional[str] = None
    cost: Optional[Cost] = None
    age: Optional[int] = None
    battles_count: Optional[int] = None


class ParticipantOut(BaseModel):
    id: int
    event_id: int
    type: str
    count: int
    strength_level: Optional[str] = None
    cost: Optional[Decimal] = None
    age: Optional[int] = None
    battles_count: Optional[int] = None


class ParticipantUpsertOut(BaseModel):
    participant: ParticipantOut
    created: bool


class ParticipantsListOut(BaseModel):
    items: List[ParticipantOut]
    page: PageOut
