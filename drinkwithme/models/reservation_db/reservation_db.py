import uuid
from sqlalchemy import Column, Integer, String, Date, Time, DateTime, Text, ForeignKey, Uuid
from drinkwithme.core.database import Base
from drinkwithme.services.reservation_status import ReservationStatus
from datetime import datetime


class Reservation(Base):
    __tablename__ = "reservations"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    venue_id = Column(Uuid(as_uuid=True), ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    date = Column(Date, nullable=False)
    time = Column(Time, nullable=False)
    party_size = Column(Integer, nullable=False, default=2)
    notes = Column(Text, nullable=True)
    status = Column(String, nullable=False, default=ReservationStatus.pending.value)
    created_at = Column(DateTime, default=datetime.utcnow)
