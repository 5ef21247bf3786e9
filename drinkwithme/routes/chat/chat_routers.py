from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from drinkwithme.core.database import get_db
from drinkwithme.core.security import get_current_user
from drinkwithme.models.user_db.user_db import User
from drinkwithme.models.match_db.match_crud import get_match_by_id, is_participant
from drinkwithme.models.message_db.message_crud import create_message, list_messages, mark_as_seen
from drinkwithme.schemas.message.message_base import MessageIn, MessageOut

chat_router = APIRouter(prefix="/chat", tags=["Chat"])


def _get_own_match(db: Session, match_id: UUID, user: User):
    match = get_match_by_id(db, match_id)
    if not match:
        raise HTTPException(status_code=404, detail="Match not found")
    if not is_participant(match, user.id):
        raise HTTPException(status_code=403, detail="Not a participant of this match")
    return match


@chat_router.get("/{match_id}/messages", response_model=List[MessageOut])
def get_messages(match_id: UUID, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    _get_own_match(db, match_id, current_user)
    return list_messages(db, match_id)


@chat_router.post("/{match_id}/messages", response_model=MessageOut, status_code=201)
def send_message(
    match_id: UUID,
    payload: MessageIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    _get_own_match(db, match_id, current_user)
    return create_message(db, match_id, current_user.id, payload.content)


@chat_router.put("/{match_id}/seen")
def mark_seen(match_id: UUID, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    _get_own_match(db, match_id, current_user)
    return {"updated": mark_as_seen(db, match_id, current_user.id)}
