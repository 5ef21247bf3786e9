import uuid
from sqlalchemy import Column, String, Integer, DateTime, Text, ForeignKey, JSON, Uuid
from sqlalchemy.orm import relationship
from drinkwithme.core.database import Base
from datetime import datetime


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True
    )

    name = Column(String, nullable=False)
    bio = Column(Text, nullable=True)
    avatar_url = Column(Text, nullable=True)
    age = Column(Integer, nullable=True)
    location = Column(String, nullable=True)
    favorite_drink = Column(String, nullable=True)
    interests = Column(JSON, default=list)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="profile")
