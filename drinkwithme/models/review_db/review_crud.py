import logging
from uuid import UUID
from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from drinkwithme.models.profile_db.profile_db import Profile
from drinkwithme.models.review_db.review_db import Review
from drinkwithme.models.venue_db.venue_db import Venue

logger = logging.getLogger(__name__)


def list_reviews_for_venue(db: Session, venue_id: UUID) -> List[Tuple[Review, Optional[str], Optional[str]]]:
    """Reviews newest first, each with the author's name and avatar."""
    return (
        db.query(Review, Profile.name, Profile.avatar_url)
        .outerjoin(Profile, Profile.user_id == Review.user_id)
        .filter(Review.venue_id == venue_id)
        .order_by(Review.created_at.desc())
        .all()
    )


def create_review(db: Session, venue: Venue, user_id: UUID, rating: int, comment: Optional[str] = None) -> Review:
    """Store a review and refresh the venue's rating and review count with it."""
    review = Review(venue_id=venue.id, user_id=user_id, rating=rating, comment=comment)

    try:
        db.add(review)
        db.flush()

        average, count = (
            db.query(func.avg(Review.rating), func.count(Review.id))
            .filter(Review.venue_id == venue.id)
            .one()
        )
        venue.rating = round(float(average), 2)
        venue.review_count = count
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    db.refresh(review)
    logger.info("Venue %s rated %s by %s, now %.2f over %d review(s)", venue.id, rating, user_id, venue.rating, count)
    return review
