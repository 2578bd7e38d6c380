from __future__ import annotations

from fastapi import APIRouter, Query

from .schemas import BeastSummaryOut, EventDetailsOut, ParticipantsSummaryOut
from .service import beast_summary, event_details, participants_summary

router = APIRouter(prefix="/views", tags=["views"])


@router.get("/event_details", response_model=EventDetailsOut)
def get_event_details(event_id: int | None = Query(None)) -> EventDetailsOut:
    return EventDetailsOut(items=event_details(event_id))


@router.get("/participants_summary", response_model=ParticipantsSummaryOut)
def get_participants_summary(event_id: int | None = Query(None)) -> ParticipantsSummaryOut:
    return ParticipantsSummaryOut(items=participants_summary(event_id))


@router.get("/beast_summary", response_model=BeastSummaryOut)
def get_beast_summary(event_id: int | None = Query(None)) -> BeastSummaryOut:
    return BeastSummaryOut(items=beast_summary(event_id))
