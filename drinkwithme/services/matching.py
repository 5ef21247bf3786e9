"""
Venue-overlap matching engine.

Users are candidates for each other when they selected at least one common
venue. Swipes are one-way decisions; a match is formed once both sides swiped
right and still share a venue at that moment.
"""

import logging
from collections import defaultdict
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from drinkwithme.models.match_db.match_crud import (
    add_match,
    get_match_by_canonical_pair,
    get_match_for_pair,
    list_matches_for_user,
)
from drinkwithme.models.profile_db.profile_crud import get_profiles_by_user_ids
from drinkwithme.models.selection_db.selection_crud import get_selections, get_overlapping_selections
from drinkwithme.models.swipe_db.swipe_crud import (
    add_swipe,
    delete_left_swipes,
    get_right_swipe,
    get_swipe,
    get_swiped_ids,
)
from drinkwithme.models.venue_db.venue_crud import get_venues_by_ids
from drinkwithme.schemas.match.match_base import CandidateOut, CandidatePoolOut, SharedVenue, SwipeOut
from drinkwithme.services.swipe_direction import SwipeDirection
from drinkwithme.services.swipe_outcome import PoolStatus, SwipeOutcome

logger = logging.getLogger(__name__)


def pick_shared_venue(shared: set[UUID]) -> UUID | None:
    """Smallest venue id (string order) of the overlap."""
    if not shared:
        return None
    return min(shared, key=str)


def get_candidate_pool(db: Session, user_id: UUID) -> CandidatePoolOut:
    my_venues = get_selections(db, user_id)
    if not my_venues:
        return CandidatePoolOut(status=PoolStatus.needs_selection, candidates=[])

    shared_by_user: dict[UUID, set[UUID]] = defaultdict(set)
    for selection in get_overlapping_selections(db, user_id, my_venues):
        shared_by_user[selection.user_id].add(selection.venue_id)

    if not shared_by_user:
        return CandidatePoolOut(status=PoolStatus.ok, candidates=[])

    seen = get_swiped_ids(db, user_id)
    eligible = set(shared_by_user) - seen
    if not eligible:
        return CandidatePoolOut(status=PoolStatus.ok, candidates=[])

    profiles = get_profiles_by_user_ids(db, eligible)
    venue_names = {
        venue.id: venue.name
        for venue in get_venues_by_ids(db, set().union(*(shared_by_user[uid] for uid in eligible)))
    }

    candidates = []
    for profile in profiles:
        shared = sorted(shared_by_user[profile.user_id], key=str)
        candidates.append(
            CandidateOut(
                user_id=profile.user_id,
                name=profile.name,
                bio=profile.bio,
                avatar_url=profile.avatar_url,
                age=profile.age,
                interests=profile.interests,
                shared_venues=[SharedVenue(id=vid, name=venue_names.get(vid, "")) for vid in shared],
                match_count=len(shared),
            )
        )

    candidates.sort(key=lambda c: (-c.match_count, str(c.user_id)))
    logger.debug("Candidate pool for %s: %d of %d overlapping users", user_id, len(candidates), len(shared_by_user))
    return CandidatePoolOut(status=PoolStatus.ok, candidates=candidates)


def record_swipe(db: Session, swiper_id: UUID, swiped_id: UUID, direction: SwipeDirection) -> SwipeOut:
    """Store a swipe and form a match on mutual interest.

    Runs as one transaction. Duplicate swipes and already materialized
    matches are reported as outcomes, never raised.
    """
    if swiper_id == swiped_id:
        raise ValueError("Users cannot swipe on themselves")

    direction = SwipeDirection(direction)

    try:
        result = _record_swipe(db, swiper_id, swiped_id, direction)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info("Swipe %s -> %s (%s): %s", swiper_id, swiped_id, direction.value, result.outcome.value)
    return result


def _record_swipe(db: Session, swiper_id: UUID, swiped_id: UUID, direction: SwipeDirection) -> SwipeOut:
    if get_swipe(db, swiper_id, swiped_id):
        return SwipeOut(outcome=SwipeOutcome.duplicate, matched=False)

    try:
        with db.begin_nested():
            add_swipe(db, swiper_id, swiped_id, direction)
    except IntegrityError:
        # Only a concurrent insert of the same pair counts as a duplicate
        if get_swipe(db, swiper_id, swiped_id) is None:
            raise
        return SwipeOut(outcome=SwipeOutcome.duplicate, matched=False)

    if direction is SwipeDirection.left:
        return SwipeOut(outcome=SwipeOutcome.recorded, matched=False)

    if not get_right_swipe(db, swiped_id, swiper_id):
        return SwipeOut(outcome=SwipeOutcome.recorded, matched=False)

    shared = get_selections(db, swiper_id) & get_selections(db, swiped_id)
    if not shared:
        logger.info("Mutual right swipe between %s and %s but no shared venue left", swiper_id, swiped_id)
        return SwipeOut(outcome=SwipeOutcome.recorded, matched=False)

    existing = get_match_for_pair(db, swiper_id, swiped_id)
    if existing:
        return SwipeOut(outcome=SwipeOutcome.match_exists, matched=True, match_id=existing.id)

    try:
        with db.begin_nested():
            match = add_match(db, swiper_id, swiped_id, pick_shared_venue(shared))
    except IntegrityError:
        existing = get_match_by_canonical_pair(db, swiper_id, swiped_id)
        if existing is None:
            raise
        return SwipeOut(outcome=SwipeOutcome.match_exists, matched=True, match_id=existing.id)

    logger.info("Match %s created for %s and %s", match.id, swiper_id, swiped_id)
    return SwipeOut(outcome=SwipeOutcome.matched, matched=True, match_id=match.id)


def reset_left_swipes(db: Session, user_id: UUID) -> int:
    try:
        deleted = delete_left_swipes(db, user_id)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info("Cleared %d left swipe(s) for %s", deleted, user_id)
    return deleted


def list_matches(db: Session, user_id: UUID):
    return list_matches_for_user(db, user_id)
