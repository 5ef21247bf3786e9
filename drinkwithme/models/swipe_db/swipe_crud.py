from uuid import UUID
from typing import Set
from sqlalchemy.orm import Session
from drinkwithme.models.swipe_db.swipe_db import Swipe
from drinkwithme.services.swipe_direction import SwipeDirection


def get_swipe(db: Session, swiper_id: UUID, swiped_id: UUID):
    return (
        db.query(Swipe)
        .filter(Swipe.swiper_id == swiper_id, Swipe.swiped_id == swiped_id)
        .first()
    )


def get_right_swipe(db: Session, swiper_id: UUID, swiped_id: UUID):
    return (
        db.query(Swipe)
        .filter(
            Swipe.swiper_id == swiper_id,
            Swipe.swiped_id == swiped_id,
            Swipe.direction == SwipeDirection.right.value,
        )
        .first()
    )


def get_swiped_ids(db: Session, swiper_id: UUID) -> Set[UUID]:
    rows = db.query(Swipe.swiped_id).filter(Swipe.swiper_id == swiper_id).all()
    return {row.swiped_id for row in rows}


def add_swipe(db: Session, swiper_id: UUID, swiped_id: UUID, direction: SwipeDirection) -> Swipe:
    """Stage a swipe row; the caller owns the transaction."""
    swipe = Swipe(swiper_id=swiper_id, swiped_id=swiped_id, direction=direction.value)
    db.add(swipe)
    return swipe


def delete_left_swipes(db: Session, swiper_id: UUID) -> int:
    return (
        db.query(Swipe)
        .filter(Swipe.swiper_id == swiper_id, Swipe.direction == SwipeDirection.left.value)
        .delete(synchronize_session=False)
    )
