from typing import List
from pydantic import BaseModel

class SeedOut(BaseModel):
    status: str
    arena_id: int
    event_ids: List[int]
