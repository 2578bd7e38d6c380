"""
Session-backed row helpers shared by the entity services.

Constraint and trigger violations surface as sqlalchemy.exc.IntegrityError
from commit(); nothing is written in that case.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from arena_api.core.db import get_engine


def create_row(model: Type[SQLModel], data: Mapping[str, Any]) -> Dict[str, Any]:
    with Session(get_engine()) as session:
        obj = model(**dict(data))
        session.add(obj)
        session.commit()
        session.refresh(obj)
        return obj.model_dump()


def get_row(model: Type[SQLModel], row_id: int) -> Optional[Dict[str, Any]]:
    with Session(get_engine()) as session:
        obj = session.get(model, row_id)
        return obj.model_dump() if obj is not None else None


def list_rows(
    model: Type[SQLModel],
    *,
    limit: int,
    offset: int,
    filters: Optional[Mapping[str, Any]] = None,
) -> Tuple[List[Dict[str, Any]], int]:
    stmt = select(model)
    count_stmt = select(func.count()).select_from(model)
    for name, value in (filters or {}).items():
        if value is None:
            continue
        col = getattr(model, name)
        stmt = stmt.where(col == value)
        count_stmt = count_stmt.where(col == value)

    with Session(get_engine()) as session:
        total = session.exec(count_stmt).one()
        rows = session.exec(stmt.order_by(model.id).offset(offset).limit(limit)).all()
        return [r.model_dump() for r in rows], int(total)


def patch_row(model: Type[SQLModel], row_id: int, changes: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    with Session(get_engine()) as session:
        obj = session.get(model, row_id)
        if obj is None:
            return None
        for name, value in changes.items():
            setattr(obj, name, value)
        session.add(obj)
        session.commit()
        session.refresh(obj)
        return obj.model_dump()


def delete_row(model: Type[SQLModel], row_id: int) -> bool:
    with Session(get_engine()) as session:
        obj = session.get(model, row_id)
        if obj is None:
            return False
        session.delete(obj)
        session.commit()
        return True
