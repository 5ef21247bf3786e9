import uuid
from sqlalchemy import Column, String, Boolean, Integer, Float, DateTime, Text, ForeignKey, JSON, Uuid
from drinkwithme.core.database import Base
from drinkwithme.services.venue_status import VenueStatus
from datetime import datetime


class Venue(Base):
    __tablename__ = "venues"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, unique=True, index=True)
    owner_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)

    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    address = Column(String, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    is_byob = Column(Boolean, default=False, nullable=False)
    cuisine = Column(String, nullable=True)
    price_range = Column(Integer, nullable=True)  # 1 (cheap) .. 4
    rating = Column(Float, nullable=True)
    review_count = Column(Integer, default=0)
    phone = Column(String, nullable=True)
    website = Column(String, nullable=True)
    features = Column(JSON, default=list)  # ['rooftop', 'live music']

    status = Column(String, nullable=False, default=VenueStatus.pending.value, index=True)
    approved_by = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    approved_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
