from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from arena_api.modules.paging import PageOut


class BattleResultCreateIn(BaseModel):
    event_id: int
    participant_type: str
    survived: int


class BattleResultPatchIn(BaseModel):
    event_id: Optional[int] = None
    participant_type: Optional[str] = None
    survived: Optional[int] = None


class BattleResultOut(BaseModel):
    id: int
    event_id: int
    participant_type: str
    survived: int


class BattleResultsListOut(BaseModel):
    items: List[BattleResultOut]
    page: PageOut
