from uuid import UUID
from typing import List, Optional, Tuple
from sqlalchemy import or_, and_
from sqlalchemy.orm import Session
from drinkwithme.models.match_db.match_db import Match
from drinkwithme.services.match_status import MatchStatus


def canonical_pair(user_a: UUID, user_b: UUID) -> Tuple[str, str]:
    low, high = sorted((str(user_a), str(user_b)))
    return low, high


def get_match_by_id(db: Session, match_id: UUID):
    return db.query(Match).filter(Match.id == match_id).first()


def get_match_for_pair(db: Session, user_a: UUID, user_b: UUID):
    return (
        db.query(Match)
        .filter(
            or_(
                and_(Match.user1_id == user_a, Match.user2_id == user_b),
                and_(Match.user1_id == user_b, Match.user2_id == user_a),
            )
        )
        .first()
    )


def get_match_by_canonical_pair(db: Session, user_a: UUID, user_b: UUID):
    low, high = canonical_pair(user_a, user_b)
    return db.query(Match).filter(Match.user_low_id == low, Match.user_high_id == high).first()


def add_match(db: Session, user1_id: UUID, user2_id: UUID, shared_venue_id: Optional[UUID]) -> Match:
    """Stage a match row; the caller owns the transaction."""
    low, high = canonical_pair(user1_id, user2_id)
    match = Match(
        user1_id=user1_id,
        user2_id=user2_id,
        user_low_id=low,
        user_high_id=high,
        shared_venue_id=shared_venue_id,
        status=MatchStatus.accepted.value,
    )
    db.add(match)
    return match


def list_matches_for_user(db: Session, user_id: UUID) -> List[Match]:
    return (
        db.query(Match)
        .filter(or_(Match.user1_id == user_id, Match.user2_id == user_id))
        .filter(Match.status == MatchStatus.accepted.value)
        .order_by(Match.updated_at.desc())
        .all()
    )


def is_participant(match: Match, user_id: UUID) -> bool:
    return user_id in (match.user1_id, match.user2_id)
