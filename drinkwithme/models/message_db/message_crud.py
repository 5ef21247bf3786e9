from uuid import UUID
from typing import List
from sqlalchemy.orm import Session
from drinkwithme.models.message_db.message_db import Message


def list_messages(db: Session, match_id: UUID) -> List[Message]:
    return (
        db.query(Message)
        .filter(Message.match_id == match_id)
        .order_by(Message.created_at.asc())
        .all()
    )


def create_message(db: Session, match_id: UUID, sender_id: UUID, content: str) -> Message:
    message = Message(match_id=match_id, sender_id=sender_id, content=content)
    db.add(message)
    db.commit()
    db.refresh(message)
    return message


def mark_as_seen(db: Session, match_id: UUID, reader_id: UUID) -> int:
    updated = (
        db.query(Message)
        .filter(Message.match_id == match_id, Message.sender_id != reader_id, Message.seen.is_(False))
        .update({Message.seen: True}, synchronize_session=False)
    )
    db.commit()
    return updated
