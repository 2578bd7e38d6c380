"""
Shared fixtures: a fresh SQLite file per test, migrated to head via Alembic.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from arena_api.core import db as core_db
from arena_api.core.migrate import upgrade


@pytest.fixture
def database_url(tmp_path, monkeypatch):
    url = "sqlite:///" + (tmp_path / "arena.db").as_posix()
    monkeypatch.setenv("DATABASE_URL", url)
    core_db.reset_engine()
    upgrade("head")
    yield url
    core_db.reset_engine()


@pytest.fixture
def engine(database_url):
    return core_db.get_engine()


@pytest.fixture
def client(database_url):
    from arena_api.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def count_rows(engine):
    def _count(table: str, **where) -> int:
        clause = " AND ".join(f"{k} = :{k}" for k in where)
        sql = f"SELECT COUNT(*) FROM {table}" + (f" WHERE {clause}" if clause else "")
        with engine.connect() as conn:
            return int(conn.execute(text(sql), where).scalar_one())

    return _count


@pytest.fixture
def colosseum(database_url):
    """Arena + one event with gladiator(4), retiarius(2), barbarian(8)."""
    from datetime import date

    from arena_api.modules.arenas.service import create_arena
    from arena_api.modules.events.service import create_event
    from arena_api.modules.participants.service import create_participant

    arena = create_arena(name="Римский Колизей", city="Рим", capacity=50000)
    event = create_event(arena_id=arena["id"], event_date=date(80, 6, 21), event_type="бой с варварами")
    for ptype, count in (("gladiator", 4), ("retiarius", 2), ("barbarian", 8)):
        create_participant({"event_id": event["id"], "type": ptype, "count": count, "strength_level": "veteran"})
    return {"arena_id": arena["id"], "event_id": event["id"]}
