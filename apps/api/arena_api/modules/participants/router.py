from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request

from arena_api.modules.paging import clamp_limit, clamp_offset, page

from .models import PARTICIPANT_TYPES
from .schemas import (
    ParticipantCreateIn,
    ParticipantOut,
    ParticipantPatchIn,
    ParticipantsListOut,
    ParticipantUpsertIn,
    ParticipantUpsertOut,
)
from .service import (
    add_or_update_participant,
    create_participant,
    delete_participant,
    get_participant,
    list_participants,
    patch_participant,
)

router = APIRouter(tags=["participants"])


@router.get("/participants", response_model=ParticipantsListOut)
def api_list_participants(
    limit: int | None = Query(None),
    offset: int | None = Query(None),
    event_id: int | None = Query(None),
    type: str | None = Query(None, description="|".join(PARTICIPANT_TYPES)),
) -> ParticipantsListOut:
    lim = clamp_limit(limit)
    off = clamp_offset(offset)
    items, total = list_participants(limit=lim, offset=off, event_id=event_id, type=type)
    return ParticipantsListOut(items=items, page=page(lim, off, total))


@router.post("/participants", response_model=ParticipantOut, status_code=201)
def api_create_participant(body: ParticipantCreateIn) -> ParticipantOut:
    return ParticipantOut(**create_participant(body.model_dump()))


@router.put("/events/{event_id}/participants/{participant_type}", response_model=ParticipantUpsertOut)
def api_upsert_participant(
    event_id: int,
    participant_type: str,
    body: ParticipantUpsertIn,
    request: Request,
) -> ParticipantUpsertOut:
    rid = getattr(getattr(request, "state", None), "request_id", None)
    row, created = add_or_update_participant(
        event_id,
        participant_type,
        body.count,
        body.strength_level,
        body.cost,
        body.age,
        body.battles_count,
        request_id=rid,
    )
    return ParticipantUpsertOut(participant=ParticipantOut(**row), created=created)


@router.get("/participants/{participant_id}", response_model=ParticipantOut)
def api_get_participant(participant_id: int) -> ParticipantOut:
    p = get_participant(participant_id)
    if p is None:
        raise HTTPException(status_code=404, detail=f"Participant not found: {participant_id}")
    return ParticipantOut(**p)


@router.patch("/participants/{participant_id}", response_model=ParticipantOut)
def api_patch_participant(participant_id: int, body: ParticipantPatchIn) -> ParticipantOut:
    p = patch_participant(participant_id, body.model_dump(exclude_unset=True))
    if p is None:
        raise HTTPException(status_code=404, detail=f"Participant not found: {participant_id}")
    return ParticipantOut(**p)


@router.delete("/participants/{participant_id}", status_code=204)
def api_delete_participant(participant_id: int) -> None:
    if not delete_participant(participant_id):
        raise HTTPException(status_code=404, detail=f"Participant not found: {participant_id}")
