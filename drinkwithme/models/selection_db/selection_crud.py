import logging
from uuid import UUID
from typing import Iterable, List, Set
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from drinkwithme.models.selection_db.selection_db import Selection

logger = logging.getLogger(__name__)


def get_selections(db: Session, user_id: UUID) -> Set[UUID]:
    rows = db.query(Selection.venue_id).filter(Selection.user_id == user_id).all()
    return {row.venue_id for row in rows}


def get_overlapping_selections(db: Session, user_id: UUID, venue_ids: Iterable[UUID]) -> List[Selection]:
    """Selections of *other* users on any of ``venue_ids``."""
    venue_ids = list(venue_ids)
    if not venue_ids:
        return []
    return (
        db.query(Selection)
        .filter(Selection.venue_id.in_(venue_ids))
        .filter(Selection.user_id != user_id)
        .all()
    )


def replace_selections(db: Session, user_id: UUID, venue_ids: Iterable[UUID]) -> List[UUID]:
    """Swap the user's selection set for ``venue_ids`` in one transaction.

    Repeated ids are collapsed, keeping the first occurrence. If anything
    fails the previous selections stay in place and the error is re-raised.
    """
    unique_ids = list(dict.fromkeys(venue_ids))

    try:
        db.query(Selection).filter(Selection.user_id == user_id).delete(synchronize_session=False)
        if unique_ids:
            db.add_all([Selection(user_id=user_id, venue_id=venue_id) for venue_id in unique_ids])
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Replacing selections failed for user %s, rolled back", user_id)
        raise

    logger.info("User %s now has %d selected venue(s)", user_id, len(unique_ids))
    return unique_ids
