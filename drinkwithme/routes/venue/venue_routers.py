from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from drinkwithme.core.database import get_db
from drinkwithme.core.security import get_current_user
from drinkwithme.models.user_db.user_db import User
from drinkwithme.models.venue_db.venue_crud import (
    create_venue,
    get_venue_by_id,
    get_venues_by_owner,
    list_approved_venues,
    search_venues,
    update_venue,
)
from drinkwithme.models.review_db.review_crud import create_review, list_reviews_for_venue
from drinkwithme.models.reservation_db.reservation_crud import create_reservation, list_reservations_for_venue
from drinkwithme.schemas.common.page_response import PageResponse
from drinkwithme.schemas.reservation.reservation_base import ReservationIn, ReservationOut
from drinkwithme.schemas.review.review_base import ReviewIn, ReviewOut
from drinkwithme.schemas.venue.venue_base import VenueCreate, VenueOut, VenueUpdate
from drinkwithme.services.venue_status import VenueStatus

venue_router = APIRouter(prefix="/venues", tags=["Venues"])


@venue_router.get("/", response_model=PageResponse[VenueOut])
def list_venues(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1),
    is_byob: Optional[bool] = None,
    min_rating: Optional[float] = Query(None, ge=0, le=5),
    city: Optional[str] = None,
    db: Session = Depends(get_db)
):
    skip = (page - 1) * size
    total, venues = list_approved_venues(
        db, skip=skip, limit=size, is_byob=is_byob, min_rating=min_rating, city=city
    )

    has_next = (page * size) < total
    has_prev = page > 1

    return PageResponse[VenueOut](
        page=page,
        size=size,
        total=total,
        has_next=has_next,
        has_prev=has_prev,
        items=venues
    )


@venue_router.get("/search", response_model=List[VenueOut])
def search(q: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    return search_venues(db, q)


@venue_router.get("/mine", response_model=List[VenueOut])
def my_venues(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return get_venues_by_owner(db, current_user.id)


@venue_router.get("/{venue_id}", response_model=VenueOut)
def get_venue(venue_id: UUID, db: Session = Depends(get_db)):
    venue = get_venue_by_id(db, venue_id)
    if not venue:
        raise HTTPException(status_code=404, detail="Venue not found")
    return venue


@venue_router.post("/", response_model=VenueOut, status_code=201)
def submit_venue(
    venue_in: VenueCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return create_venue(db, current_user.id, venue_in)


def _get_approved_venue(db: Session, venue_id: UUID):
    venue = get_venue_by_id(db, venue_id)
    if not venue or venue.status != VenueStatus.approved.value:
        raise HTTPException(status_code=404, detail="Venue not found")
    return venue


def _get_owned_venue(db: Session, venue_id: UUID, user: User):
    venue = get_venue_by_id(db, venue_id)
    if not venue:
        raise HTTPException(status_code=404, detail="Venue not found")
    if venue.owner_id != user.id:
        raise HTTPException(status_code=403, detail="Only the venue owner can do this")
    return venue


@venue_router.put("/{venue_id}", response_model=VenueOut)
def edit_venue(
    venue_id: UUID,
    updates: VenueUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    _get_owned_venue(db, venue_id, current_user)
    return update_venue(db, venue_id, updates)


@venue_router.get("/{venue_id}/reviews", response_model=List[ReviewOut])
def get_reviews(venue_id: UUID, db: Session = Depends(get_db)):
    _get_approved_venue(db, venue_id)
    return [
        ReviewOut(
            id=review.id,
            venue_id=review.venue_id,
            user_id=review.user_id,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
            author_name=name,
            author_avatar_url=avatar_url,
        )
        for review, name, avatar_url in list_reviews_for_venue(db, venue_id)
    ]


@venue_router.post("/{venue_id}/reviews", response_model=ReviewOut, status_code=201)
def add_review(
    venue_id: UUID,
    payload: ReviewIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    venue = _get_approved_venue(db, venue_id)
    if venue.owner_id == current_user.id:
        raise HTTPException(status_code=400, detail="Owners cannot review their own venue")

    review = create_review(db, venue, current_user.id, payload.rating, payload.comment)
    profile = current_user.profile
    return ReviewOut(
        id=review.id,
        venue_id=review.venue_id,
        user_id=review.user_id,
        rating=review.rating,
        comment=review.comment,
        created_at=review.created_at,
        author_name=profile.name if profile else None,
        author_avatar_url=profile.avatar_url if profile else None,
    )


@venue_router.post("/{venue_id}/reservations", response_model=ReservationOut, status_code=201)
def reserve(
    venue_id: UUID,
    payload: ReservationIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    _get_approved_venue(db, venue_id)
    return create_reservation(db, venue_id, current_user.id, payload)


@venue_router.get("/{venue_id}/reservations", response_model=List[ReservationOut])
def venue_reservations(
    venue_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    _get_owned_venue(db, venue_id, current_user)
    return list_reservations_for_venue(db, venue_id)
