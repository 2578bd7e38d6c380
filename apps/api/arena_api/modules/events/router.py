from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request

from arena_api.modules.paging import clamp_limit, clamp_offset, page

from .schemas import EventCreateIn, EventDeleteOut, EventOut, EventPatchIn, EventsListOut
from .service import create_event, delete_event, get_event, list_events, patch_event

router = APIRouter(tags=["events"])


@router.get("/events", response_model=EventsListOut)
def api_list_events(
    limit: int | None = Query(None),
    offset: int | None = Query(None),
    arena_id: int | None = Query(None),
) -> EventsListOut:
    lim = clamp_limit(limit)
    off = clamp_offset(offset)
    items, total = list_events(limit=lim, offset=off, arena_id=arena_id)
    return EventsListOut(items=items, page=page(lim, off, total))


@router.post("/events", response_model=EventOut, status_code=201)
def api_create_event(body: EventCreateIn) -> EventOut:
    return EventOut(**create_event(arena_id=body.arena_id, event_date=body.event_date, event_type=body.event_type))


@router.get("/events/{event_id}", response_model=EventOut)
def api_get_event(event_id: int) -> EventOut:
    e = get_event(event_id)
    if e is None:
        raise HTTPException(status_code=404, detail=f"Event not found: {event_id}")
    return EventOut(**e)


@router.patch("/events/{event_id}", response_model=EventOut)
def api_patch_event(event_id: int, body: EventPatchIn) -> EventOut:
    e = patch_event(event_id, body.model_dump(exclude_unset=True))
    if e is None:
        raise HTTPException(status_code=404, detail=f"Event not found: {event_id}")
    return EventOut(**e)


@router.delete("/events/{event_id}", response_model=EventDeleteOut)
def api_delete_event(event_id: int, request: Request) -> EventDeleteOut:
    # unknown id is not an error (idempotent procedure)
    rid = getattr(getattr(request, "state", None), "request_id", None)
    deleted = delete_event(event_id, request_id=rid)
    return EventDeleteOut(event_id=event_id, deleted=deleted)
