from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from arena_api.modules.paging import clamp_limit, clamp_offset, page

from .models import BEAST_SPECIES
from .schemas import BeastCreateIn, BeastOut, BeastPatchIn, BeastsListOut
from .service import create_beast, delete_beast, get_beast, list_beasts, patch_beast

router = APIRouter(tags=["beasts"])


@router.get("/beasts", response_model=BeastsListOut)
def api_list_beasts(
    limit: int | None = Query(None),
    offset: int | None = Query(None),
    event_id: int | None = Query(None),
    species: str | None = Query(None, description="|".join(BEAST_SPECIES)),
) -> BeastsListOut:
    lim = clamp_limit(limit)
    off = clamp_offset(offset)
    items, total = list_beasts(limit=lim, offset=off, event_id=event_id, species=species)
    return BeastsListOut(items=items, page=page(lim, off, total))


@router.post("/beasts", response_model=BeastOut, status_code=201)
def api_create_beast(body: BeastCreateIn) -> BeastOut:
    return BeastOut(**create_beast(body.model_dump()))


@router.get("/beasts/{beast_id}", response_model=BeastOut)
def api_get_beast(beast_id: int) -> BeastOut:
    b = get_beast(beast_id)
    if b is None:
        raise HTTPException(status_code=404, detail=f"Beast not found: {beast_id}")
    return BeastOut(**b)


@router.patch("/beasts/{beast_id}", response_model=BeastOut)
def api_patch_beast(beast_id: int, body: BeastPatchIn) -> BeastOut:
    b = patch_beast(beast_id, body.model_dump(exclude_unset=True))
    if b is None:
        raise HTTPException(status_code=404, detail=f"Beast not found: {beast_id}")
    return BeastOut(**b)


@router.delete("/beasts/{beast_id}", status_code=204)
def api_delete_beast(beast_id: int) -> None:
    if not delete_beast(beast_id):
        raise HTTPException(status_code=404, detail=f"Beast not found: {beast_id}")
