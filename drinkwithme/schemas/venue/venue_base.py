from pydantic import BaseModel, Field
from uuid import UUID
from typing import List, Optional
from datetime import datetime

from drinkwithme.services.venue_status import VenueStatus


class VenueBase(BaseModel):
    name: str
    address: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    is_byob: bool = False
    description: Optional[str] = None
    cuisine: Optional[str] = None
    price_range: Optional[int] = Field(default=None, ge=1, le=4)
    phone: Optional[str] = None
    website: Optional[str] = None
    features: Optional[List[str]] = None


class VenueCreate(VenueBase):
    pass


class VenueOut(VenueBase):
    id: UUID
    owner_id: Optional[UUID] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    status: VenueStatus
    approved_at: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class VenueUpdate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    is_byob: Optional[bool] = None
    description: Optional[str] = None
    cuisine: Optional[str] = None
    price_range: Optional[int] = Field(default=None, ge=1, le=4)
    phone: Optional[str] = None
    website: Optional[str] = None
    features: Optional[List[str]] = None
