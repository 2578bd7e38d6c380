from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import text

from arena_api.core.db import get_engine
from arena_api.core.logs import audit
from arena_api.modules.crud import create_row, get_row, list_rows, patch_row

from .models import Event


def create_event(*, arena_id: int, event_date: date, event_type: str) -> Dict[str, Any]:
    return create_row(Event, {"arena_id": arena_id, "event_date": event_date, "event_type": event_type})


def get_event(event_id: int) -> Optional[Dict[str, Any]]:
    return get_row(Event, event_id)


def list_events(limit: int, offset: int, arena_id: Optional[int] = None) -> Tuple[List[Dict[str, Any]], int]:
    return list_rows(Event, limit=limit, offset=offset, filters={"arena_id": arena_id})


def patch_event(event_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return patch_row(Event, event_id, changes)


def delete_event(event_id: int, request_id: Optional[str] = None) -> bool:
    """
    DeleteEvent procedure (idempotent):
    - removes the event row; participants, beasts and battle_results cascade
    - an unknown id is a no-op, returns False
    """
    with get_engine().begin() as conn:
        res = conn.execute(text("DELETE FROM events WHERE id = :id"), {"id": event_id})
        deleted = res.rowcount > 0

    audit("event.delete", request_id, __name__, event_id=event_id, deleted=deleted)
    return deleted
