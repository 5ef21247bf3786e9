from pydantic import BaseModel, EmailStr, Field
from uuid import UUID
from typing import List, Optional
from datetime import datetime


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8)
    name: str
    age: Optional[int] = Field(default=None, ge=18)
    bio: Optional[str] = None
    favorite_drink: Optional[str] = None
    interests: Optional[List[str]] = None


class UserOut(BaseModel):
    id: UUID
    email: EmailStr
    is_admin: bool
    created_at: datetime

    class Config:
        from_attributes = True
