from pydantic import BaseModel
from uuid import UUID
from typing import List, Optional
from datetime import datetime

from drinkwithme.services.swipe_direction import SwipeDirection
from drinkwithme.services.swipe_outcome import SwipeOutcome, PoolStatus


class SharedVenue(BaseModel):
    id: UUID
    name: str


class CandidateOut(BaseModel):
    user_id: UUID
    name: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    age: Optional[int] = None
    interests: Optional[List[str]] = None
    shared_venues: List[SharedVenue]
    match_count: int


class CandidatePoolOut(BaseModel):
    status: PoolStatus
    candidates: List[CandidateOut]


class SwipeIn(BaseModel):
    swiped_id: UUID
    direction: SwipeDirection


class SwipeOut(BaseModel):
    outcome: SwipeOutcome
    matched: bool
    match_id: Optional[UUID] = None


class MatchOut(BaseModel):
    id: UUID
    user1_id: UUID
    user2_id: UUID
    shared_venue_id: Optional[UUID] = None
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ResetOut(BaseModel):
    deleted: int
