from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from drinkwithme.core.database import get_db
from drinkwithme.core.security import get_current_admin
from drinkwithme.models.user_db.user_db import User
from drinkwithme.models.venue_db.venue_crud import list_venues_by_status, set_venue_status
from drinkwithme.schemas.venue.venue_base import VenueOut
from drinkwithme.services.venue_status import VenueStatus

admin_router = APIRouter(prefix="/admin", tags=["Admin"])


@admin_router.get("/venues", response_model=List[VenueOut])
def list_submissions(
    status: VenueStatus = Query(VenueStatus.pending),
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin)
):
    return list_venues_by_status(db, status)


@admin_router.put("/venues/{venue_id}/approve", response_model=VenueOut)
def approve_venue(venue_id: UUID, db: Session = Depends(get_db), admin: User = Depends(get_current_admin)):
    venue = set_venue_status(db, venue_id, VenueStatus.approved, admin.id)
    if not venue:
        raise HTTPException(status_code=404, detail="Venue not found")
    return venue


@admin_router.put("/venues/{venue_id}/reject", response_model=VenueOut)
def reject_venue(venue_id: UUID, db: Session = Depends(get_db), admin: User = Depends(get_current_admin)):
    venue = set_venue_status(db, venue_id, VenueStatus.rejected, admin.id)
    if not venue:
        raise HTTPException(status_code=404, detail="Venue not found")
    return venue
