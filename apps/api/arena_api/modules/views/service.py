"""
Read-only projections over the SQL views (recomputed per query, no materialization).
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import text

from arena_api.core.db import get_engine

_ORDER = {
    "event_details": "event_id",
    "participants_summary": "event_id, type",
    "beast_summary": "event_id, species",
}


def _select_view(view: str, event_id: Optional[int]) -> List[Dict[str, Any]]:
    where = ""
    params: Dict[str, Any] = {}
    if event_id is not None:
        where = "WHERE event_id = :event_id"
        params["event_id"] = event_id

    with get_engine().connect() as conn:
        rows = conn.execute(text(f"SELECT * FROM {view} {where} ORDER BY {_ORDER[view]}"), params).mappings().all()
    return [dict(r) for r in rows]


def event_details(event_id: Optional[int] = None) -> List[Dict[str, Any]]:
    return _select_view("event_details", event_id)


def participants_summary(event_id: Optional[int] = None) -> List[Dict[str, Any]]:
    return _select_view("participants_summary", event_id)


def beast_summary(event_id: Optional[int] = None) -> List[Dict[str, Any]]:
    return _select_view("beast_summary", event_id)
