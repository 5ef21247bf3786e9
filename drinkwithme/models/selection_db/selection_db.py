import uuid
from sqlalchemy import Column, DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
from drinkwithme.core.database import Base
from datetime import datetime


class Selection(Base):
    __tablename__ = "selections"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    venue_id = Column(Uuid(as_uuid=True), ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True)
    selected_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="selections")

    __table_args__ = (
        UniqueConstraint("user_id", "venue_id", name="uq_selection_user_venue"),
    )
