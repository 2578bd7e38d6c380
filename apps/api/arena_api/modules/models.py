"""All table classes, imported for SQLModel.metadata (alembic env)."""
from __future__ import annotations

from arena_api.modules.arenas.models import Arena
from arena_api.modules.battle_results.models import BattleResult
from arena_api.modules.beasts.models import Beast
from arena_api.modules.events.models import Event
from arena_api.modules.participants.models import Participant

__all__ = ["Arena", "Event", "Participant", "Beast", "BattleResult"]
