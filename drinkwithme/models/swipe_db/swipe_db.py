import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint, CheckConstraint, Uuid
from drinkwithme.core.database import Base
from datetime import datetime


class Swipe(Base):
    __tablename__ = "swipes"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    swiper_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    swiped_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    direction = Column(String(5), nullable=False)  # 'left' | 'right'
    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("swiper_id", "swiped_id", name="uq_swipe_pair"),
        CheckConstraint("swiper_id != swiped_id", name="check_no_self_swipe"),
        CheckConstraint("direction IN ('left', 'right')", name="check_swipe_direction"),
    )
