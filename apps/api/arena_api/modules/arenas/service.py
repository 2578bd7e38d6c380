from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from arena_api.modules.crud import create_row, delete_row, get_row, list_rows, patch_row

from .models import Arena


def create_arena(*, name: str, city: str, capacity: int) -> Dict[str, Any]:
    return create_row(Arena, {"name": name, "city": city, "capacity": capacity})


def get_arena(arena_id: int) -> Optional[Dict[str, Any]]:
    return get_row(Arena, arena_id)


def list_arenas(limit: int, offset: int, city: Optional[str] = None) -> Tuple[List[Dict[str, Any]], int]:
    return list_rows(Arena, limit=limit, offset=offset, filters={"city": city})


def patch_arena(arena_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return patch_row(Arena, arena_id, changes)


def delete_arena(arena_id: int) -> bool:
    """Removes the arena; its events and everything under them go with it (FK cascade)."""
    return delete_row(Arena, arena_id)
