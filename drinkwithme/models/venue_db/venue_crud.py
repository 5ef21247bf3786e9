from datetime import datetime
from uuid import UUID
from typing import Iterable, List, Optional, Tuple
from sqlalchemy import or_
from sqlalchemy.orm import Session
from drinkwithme.models.venue_db.venue_db import Venue
from drinkwithme.schemas.venue.venue_base import VenueCreate, VenueUpdate
from drinkwithme.services.venue_status import VenueStatus


def get_venue_by_id(db: Session, venue_id: UUID):
    return db.query(Venue).filter(Venue.id == venue_id).first()


def get_venues_by_ids(db: Session, venue_ids: Iterable[UUID]) -> List[Venue]:
    venue_ids = list(venue_ids)
    if not venue_ids:
        return []
    return db.query(Venue).filter(Venue.id.in_(venue_ids)).all()


def get_unselectable_venue_ids(db: Session, venue_ids: Iterable[UUID]) -> List[UUID]:
    """Ids from ``venue_ids`` that are unknown or not approved."""
    venue_ids = list(dict.fromkeys(venue_ids))
    approved = {
        v.id for v in get_venues_by_ids(db, venue_ids)
        if v.status == VenueStatus.approved.value
    }
    return [v for v in venue_ids if v not in approved]


def list_approved_venues(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    is_byob: Optional[bool] = None,
    min_rating: Optional[float] = None,
    city: Optional[str] = None,
) -> Tuple[int, List[Venue]]:
    query = db.query(Venue).filter(Venue.status == VenueStatus.approved.value)

    if is_byob is not None:
        query = query.filter(Venue.is_byob == is_byob)

    if min_rating:
        query = query.filter(Venue.rating >= min_rating)

    if city:
        query = query.filter(Venue.address.ilike(f"%{city}%"))

    total = query.count()
    venues = query.order_by(Venue.rating.desc().nulls_last(), Venue.name).offset(skip).limit(limit).all()
    return total, venues


def search_venues(db: Session, text: str) -> List[Venue]:
    pattern = f"%{text}%"
    return (
        db.query(Venue)
        .filter(Venue.status == VenueStatus.approved.value)
        .filter(or_(Venue.name.ilike(pattern), Venue.cuisine.ilike(pattern)))
        .order_by(Venue.name)
        .all()
    )


def list_venues_by_status(db: Session, status: VenueStatus) -> List[Venue]:
    return db.query(Venue).filter(Venue.status == status.value).order_by(Venue.created_at).all()


def get_venues_by_owner(db: Session, owner_id: UUID) -> List[Venue]:
    return db.query(Venue).filter(Venue.owner_id == owner_id).order_by(Venue.created_at).all()


def create_venue(db: Session, owner_id: UUID, venue: VenueCreate, status: VenueStatus = VenueStatus.pending):
    db_venue = Venue(
        **venue.model_dump(exclude={"features"}),
        features=venue.features or [],
        owner_id=owner_id,
        status=status.value,
    )
    db.add(db_venue)
    db.commit()
    db.refresh(db_venue)
    return db_venue


def set_venue_status(db: Session, venue_id: UUID, status: VenueStatus, admin_id: UUID):
    venue = get_venue_by_id(db, venue_id)
    if not venue:
        return None

    venue.status = status.value
    if status == VenueStatus.approved:
        venue.approved_by = admin_id
        venue.approved_at = datetime.utcnow()
    else:
        venue.approved_by = None
        venue.approved_at = None

    db.commit()
    db.refresh(venue)
    return venue


def update_venue(db: Session, venue_id: UUID, updates: VenueUpdate):
    venue = get_venue_by_id(db, venue_id)
    if not venue:
        return None

    for field, value in updates.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(venue, field, value)

    db.commit()
    db.refresh(venue)
    return venue
