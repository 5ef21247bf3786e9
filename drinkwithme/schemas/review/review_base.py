from pydantic import BaseModel, Field
from uuid import UUID
from typing import Optional
from datetime import datetime


class ReviewIn(BaseModel):
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = Field(default=None, max_length=1000)


class ReviewOut(BaseModel):
    id: UUID
    venue_id: UUID
    user_id: UUID
    rating: int
    comment: Optional[str] = None
    created_at: datetime
    author_name: Optional[str] = None
    author_avatar_url: Optional[str] = None
