import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint, Uuid
from drinkwithme.core.database import Base
from drinkwithme.services.match_status import MatchStatus
from datetime import datetime


class Match(Base):
    __tablename__ = "matches"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, unique=True, index=True)
    user1_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    user2_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Canonical pair: str(id) sorted, so {A, B} and {B, A} share one row
    user_low_id = Column(String(36), nullable=False)
    user_high_id = Column(String(36), nullable=False)

    shared_venue_id = Column(Uuid(as_uuid=True), ForeignKey("venues.id", ondelete="SET NULL"), nullable=True)
    status = Column(String, nullable=False, default=MatchStatus.accepted.value)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("user_low_id", "user_high_id", name="uq_match_pair"),
    )
