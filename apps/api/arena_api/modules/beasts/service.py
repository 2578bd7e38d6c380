from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from arena_api.modules.crud import create_row, delete_row, get_row, list_rows, patch_row

from .models import Beast


def create_beast(data: Dict[str, Any]) -> Dict[str, Any]:
    return create_row(Beast, data)


def get_beast(beast_id: int) -> Optional[Dict[str, Any]]:
    return get_row(Beast, beast_id)


def list_beasts(
    limit: int,
    offset: int,
    event_id: Optional[int] = None,
    species: Optional[str] = None,
) -> Tuple[List[Dict[str, Any]], int]:
    return list_rows(Beast, limit=limit, offset=offset, filters={"event_id": event_id, "species": species})


def patch_beast(beast_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return patch_row(Beast, beast_id, changes)


def delete_beast(beast_id: int) -> bool:
    return delete_row(Beast, beast_id)
