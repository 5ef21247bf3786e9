from pydantic import BaseModel
from uuid import UUID
from typing import List


class SelectionIn(BaseModel):
    venue_ids: List[UUID]


class SelectionOut(BaseModel):
    user_id: UUID
    venue_ids: List[UUID]
