from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from arena_api.modules.paging import clamp_limit, clamp_offset, page

from .schemas import ArenaCreateIn, ArenaOut, ArenaPatchIn, ArenasListOut
from .service import create_arena, delete_arena, get_arena, list_arenas, patch_arena

router = APIRouter(tags=["arenas"])


@router.get("/arenas", response_model=ArenasListOut)
def api_list_arenas(
    limit: int | None = Query(None, description="Max items to return (default 50, max 200)"),
    offset: int | None = Query(None, description="Offset from start (default 0)"),
    city: str | None = Query(None),
) -> ArenasListOut:
    lim = clamp_limit(limit)
    off = clamp_offset(offset)
    items, total = list_arenas(limit=lim, offset=off, city=city)
    return ArenasListOut(items=items, page=page(lim, off, total))


@router.post("/arenas", response_model=ArenaOut, status_code=201)
def api_create_arena(body: ArenaCreateIn) -> ArenaOut:
    return ArenaOut(**create_arena(name=body.name, city=body.city, capacity=body.capacity))


@router.get("/arenas/{arena_id}", response_model=ArenaOut)
def api_get_arena(arena_id: int) -> ArenaOut:
    a = get_arena(arena_id)
    if a is None:
        raise HTTPException(status_code=404, detail=f"Arena not found: {arena_id}")
    return ArenaOut(**a)


@router.patch("/arenas/{arena_id}", response_model=ArenaOut)
def api_patch_arena(arena_id: int, body: ArenaPatchIn) -> ArenaOut:
    a = patch_arena(arena_id, body.model_dump(exclude_unset=True))
    if a is None:
        raise HTTPException(status_code=404, detail=f"Arena not found: {arena_id}")
    return ArenaOut(**a)


@router.delete("/arenas/{arena_id}", status_code=204)
def api_delete_arena(arena_id: int) -> None:
    if not delete_arena(arena_id):
        raise HTTPException(status_code=404, detail=f"Arena not found: {arena_id}")
