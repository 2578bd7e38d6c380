from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import Numeric, bindparam, select, text

from arena_api.core.db import get_engine
from arena_api.core.logs import audit
from arena_api.modules.crud import create_row, delete_row, get_row, list_rows, patch_row

from .models import Participant

_FIELDS = ("count", "strength_level", "cost", "age", "battles_count")

# SQLite has no native decimal; the typed bind stores cost through NUMERIC(10,2)
_COST = bindparam("cost", type_=Numeric(10, 2))


def create_participant(data: Dict[str, Any]) -> Dict[str, Any]:
    """Plain insert; an existing (event_id, type) pair gets an additional row."""
    return create_row(Participant, data)


def get_participant(participant_id: int) -> Optional[Dict[str, Any]]:
    return get_row(Participant, participant_id)


def list_participants(
    limit: int,
    offset: int,
    event_id: Optional[int] = None,
    type: Optional[str] = None,
) -> Tuple[List[Dict[str, Any]], int]:
    return list_rows(Participant, limit=limit, offset=offset, filters={"event_id": event_id, "type": type})


def patch_participant(participant_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return patch_row(Participant, participant_id, changes)


def delete_participant(participant_id: int) -> bool:
    return delete_row(Participant, participant_id)


def add_or_update_participant(
    event_id: int,
    type: str,
    count: int,
    strength_level: Optional[str] = None,
    cost: Optional[Decimal] = None,
    age: Optional[int] = None,
    battles_count: Optional[int] = None,
    *,
    request_id: Optional[str] = None,
) -> Tuple[Dict[str, Any], bool]:
    """
    AddOrUpdateParticipant procedure (last write wins).

    One write transaction, opened by the UPDATE so concurrent callers serialise:
    - overwrite every non-key field of the lowest-id row for (event_id, type)
    - no such row -> insert one
    - drop any other rows for the pair, leaving exactly one
    Returns (row, created).
    """
    params: Dict[str, Any] = {
        "event_id": event_id,
        "type": type,
        "count": count,
        "strength_level": strength_level,
        "cost": cost,
        "age": age,
        "battles_count": battles_count,
    }
    set_clause = ", ".join(f"{f} = :{f}" for f in _FIELDS)

    with get_engine().begin() as conn:
        res = conn.execute(
            text(
                f"UPDATE participants SET {set_clause} "
                "WHERE id = (SELECT MIN(id) FROM participants WHERE event_id = :event_id AND type = :type)"
            ).bindparams(_COST),
            params,
        )
        created = res.rowcount == 0
        if created:
            ins = conn.execute(
                text(
                    "INSERT INTO participants (event_id, type, count, strength_level, cost, age, battles_count) "
                    "VALUES (:event_id, :type, :count, :strength_level, :cost, :age, :battles_count)"
                ).bindparams(_COST),
                params,
            )
            participant_id = int(ins.lastrowid)
        else:
            participant_id = int(
                conn.execute(
                    text("SELECT MIN(id) FROM participants WHERE event_id = :event_id AND type = :type"),
                    params,
                ).scalar_one()
            )
            conn.execute(
                text("DELETE FROM participants WHERE event_id = :event_id AND type = :type AND id != :id"),
                {**params, "id": participant_id},
            )

        table = Participant.__table__
        row = conn.execute(select(table).where(table.c.id == participant_id)).mappings().one()
        out = dict(row)

    audit(
        "participant.upsert",
        request_id,
        __name__,
        event_id=event_id,
        participant_type=type,
        participant_id=participant_id,
        created=created,
    )
    return out, created
