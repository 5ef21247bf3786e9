import datetime as dt
from pydantic import BaseModel, Field
from uuid import UUID
from typing import Optional

from drinkwithme.services.reservation_status import ReservationStatus


class ReservationIn(BaseModel):
    date: dt.date
    time: dt.time
    party_size: int = Field(default=2, ge=1, le=20)
    notes: Optional[str] = Field(default=None, max_length=500)


class ReservationOut(ReservationIn):
    id: UUID
    venue_id: UUID
    user_id: UUID
    status: ReservationStatus
    created_at: dt.datetime

    class Config:
        from_attributes = True
