from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from arena_api.modules.paging import clamp_limit, clamp_offset, page

from .schemas import BattleResultCreateIn, BattleResultOut, BattleResultPatchIn, BattleResultsListOut
from .service import (
    create_battle_result,
    delete_battle_result,
    get_battle_result,
    list_battle_results,
    patch_battle_result,
)

router = APIRouter(tags=["battle_results"])


@router.get("/battle_results", response_model=BattleResultsListOut)
def api_list_battle_results(
    limit: int | None = Query(None),
    offset: int | None = Query(None),
    event_id: int | None = Query(None),
) -> BattleResultsListOut:
    lim = clamp_limit(limit)
    off = clamp_offset(offset)
    items, total = list_battle_results(limit=lim, offset=off, event_id=event_id)
    return BattleResultsListOut(items=items, page=page(lim, off, total))


@router.post("/battle_results", response_model=BattleResultOut, status_code=201)
def api_create_battle_result(body: BattleResultCreateIn) -> BattleResultOut:
    r = create_battle_result(event_id=body.event_id, participant_type=body.participant_type, survived=body.survived)
    return BattleResultOut(**r)


@router.get("/battle_results/{result_id}", response_model=BattleResultOut)
def api_get_battle_result(result_id: int) -> BattleResultOut:
    r = get_battle_result(result_id)
    if r is None:
        raise HTTPException(status_code=404, detail=f"BattleResult not found: {result_id}")
    return BattleResultOut(**r)


@router.patch("/battle_results/{result_id}", response_model=BattleResultOut)
def api_patch_battle_result(result_id: int, body: BattleResultPatchIn) -> BattleResultOut:
    r = patch_battle_result(result_id, body.model_dump(exclude_unset=True))
    if r is None:
        raise HTTPException(status_code=404, detail=f"BattleResult not found: {result_id}")
    return BattleResultOut(**r)


@router.delete("/battle_results/{result_id}", status_code=204)
def api_delete_battle_result(result_id: int) -> None:
    if not delete_battle_result(result_id):
        raise HTTPException(status_code=404, detail=f"BattleResult not found: {result_id}")
