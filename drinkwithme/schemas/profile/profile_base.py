from pydantic import BaseModel, Field
from uuid import UUID
from typing import List, Optional
from datetime import datetime


class ProfileBase(BaseModel):
    name: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    age: Optional[int] = None
    location: Optional[str] = None
    favorite_drink: Optional[str] = None
    interests: Optional[List[str]] = None


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=18)
    location: Optional[str] = None
    favorite_drink: Optional[str] = None
    interests: Optional[List[str]] = None


class ProfileOut(ProfileBase):
    user_id: UUID
    updated_at: datetime

    class Config:
        from_attributes = True
