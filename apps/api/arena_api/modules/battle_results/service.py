from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from arena_api.modules.crud import create_row, delete_row, get_row, list_rows, patch_row

from .models import BattleResult


def create_battle_result(*, event_id: int, participant_type: str, survived: int) -> Dict[str, Any]:
    # survivor ceiling is checked by trg_battle_results_survivors_insert
    return create_row(
        BattleResult,
        {"event_id": event_id, "participant_type": participant_type, "survived": survived},
    )


def get_battle_result(result_id: int) -> Optional[Dict[str, Any]]:
    return get_row(BattleResult, result_id)


def list_battle_results(limit: int, offset: int, event_id: Optional[int] = None) -> Tuple[List[Dict[str, Any]], int]:
    return list_rows(BattleResult, limit=limit, offset=offset, filters={"event_id": event_id})


def patch_battle_result(result_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return patch_row(BattleResult, result_id, changes)


def delete_battle_result(result_id: int) -> bool:
    return delete_row(BattleResult, result_id)
