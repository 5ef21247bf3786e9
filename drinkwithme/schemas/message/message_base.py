from pydantic import BaseModel, Field
from uuid import UUID
from datetime import datetime


class MessageIn(BaseModel):
    content: str = Field(min_length=1, max_length=2000)


class MessageOut(BaseModel):
    id: UUID
    match_id: UUID
    sender_id: UUID
    content: str
    seen: bool
    created_at: datetime

    class Config:
        from_attributes = True
