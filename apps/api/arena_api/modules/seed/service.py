"""
Demo scenario: the Colosseum hosting a fight with barbarians and a beast hunt.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlmodel import Session

from arena_api.core.db import get_engine
from arena_api.core.logs import audit
from arena_api.modules.arenas.models import Arena
from arena_api.modules.battle_results.models import BattleResult
from arena_api.modules.beasts.models import Beast
from arena_api.modules.events.models import Event
from arena_api.modules.participants.models import Participant

DEMO_ARENA = {"name": "Римский Колизей", "city": "Рим", "capacity": 50000}

DEMO_EVENTS: List[Dict[str, Any]] = [
    {
        "event_date": date(80, 6, 21),
        "event_type": "бой с варварами",
        "participants": [
            {"type": "gladiator", "count": 4, "strength_level": "veteran", "cost": Decimal("1500.00"), "age": 28, "battles_count": 12},
            {"type": "retiarius", "count": 2, "strength_level": "experienced", "cost": Decimal("900.00"), "age": 24, "battles_count": 5},
            {"type": "barbarian", "count": 8, "strength_level": "novice", "cost": Decimal("150.00"), "age": 30, "battles_count": 0},
        ],
        "beasts": [],
        "results": [("gladiator", 2), ("retiarius", 1), ("barbarian", 0)],
    },
    {
        "event_date": date(80, 6, 22),
        "event_type": "травля зверями",
        "participants": [
            {"type": "victim", "count": 6, "strength_level": "novice", "cost": Decimal("0.00"), "age": 35, "battles_count": 0},
        ],
        "beasts": [
            {"species": "lion", "count": 3, "strength": 90, "speed": 60, "entertainment_value": Decimal("9.50")},
            {"species": "leopard", "count": 2, "strength": 70, "speed": 85, "entertainment_value": Decimal("8.00")},
        ],
        # species labels resolve against beasts
        "results": [("victim", 0), ("lion", 3), ("leopard", 1)],
    },
]


def seed_demo(request_id: Optional[str] = None) -> Dict[str, Any]:
    """Insert the demo scenario in a single transaction. Returns created ids."""
    with Session(get_engine()) as session:
        arena = Arena(**DEMO_ARENA)
        session.add(arena)
        session.flush()

        event_ids: List[int] = []
        for spec in DEMO_EVENTS:
            ev = Event(arena_id=arena.id, event_date=spec["event_date"], event_type=spec["event_type"])
            session.add(ev)
            session.flush()
            event_ids.append(int(ev.id))

            for p in spec["participants"]:
                session.add(Participant(event_id=ev.id, **p))
            for b in spec["beasts"]:
                session.add(Beast(event_id=ev.id, **b))
            # results reference counts above; flush them first
            session.flush()
            for label, survived in spec["results"]:
                session.add(BattleResult(event_id=ev.id, participant_type=label, survived=survived))
            session.flush()

        session.commit()
        arena_id = int(arena.id)

    audit("seed.demo", request_id, __name__, arena_id=arena_id, event_ids=event_ids)
    return {"status": "ok", "arena_id": arena_id, "event_ids": event_ids}
