from uuid import UUID
from typing import List
from sqlalchemy.orm import Session
from drinkwithme.models.reservation_db.reservation_db import Reservation
from drinkwithme.schemas.reservation.reservation_base import ReservationIn


def create_reservation(db: Session, venue_id: UUID, user_id: UUID, reservation: ReservationIn) -> Reservation:
    db_reservation = Reservation(venue_id=venue_id, user_id=user_id, **reservation.model_dump())
    db.add(db_reservation)
    db.commit()
    db.refresh(db_reservation)
    return db_reservation


def list_reservations_for_venue(db: Session, venue_id: UUID) -> List[Reservation]:
    return (
        db.query(Reservation)
        .filter(Reservation.venue_id == venue_id)
        .order_by(Reservation.date.asc(), Reservation.time.asc())
        .all()
    )
