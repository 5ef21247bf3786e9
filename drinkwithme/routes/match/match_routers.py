from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from drinkwithme.core.database import get_db
from drinkwithme.core.security import get_current_user
from drinkwithme.models.user_db.user_db import User
from drinkwithme.models.user_db.user_db_crud import get_user_by_id
from drinkwithme.schemas.match.match_base import CandidatePoolOut, MatchOut, ResetOut, SwipeIn, SwipeOut
from drinkwithme.services.matching import get_candidate_pool, list_matches, record_swipe, reset_left_swipes

match_router = APIRouter(prefix="/matching", tags=["Matching"])


@match_router.get("/candidates", response_model=CandidatePoolOut)
def candidates(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return get_candidate_pool(db, current_user.id)


@match_router.post("/swipes", response_model=SwipeOut)
def swipe(payload: SwipeIn, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    if payload.swiped_id == current_user.id:
        raise HTTPException(status_code=400, detail="Cannot swipe on yourself")

    if not get_user_by_id(db, payload.swiped_id):
        raise HTTPException(status_code=404, detail="User not found")

    return record_swipe(db, current_user.id, payload.swiped_id, payload.direction)


@match_router.delete("/swipes/left", response_model=ResetOut)
def reset_left(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return ResetOut(deleted=reset_left_swipes(db, current_user.id))


@match_router.get("/matches", response_model=List[MatchOut])
def my_matches(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return list_matches(db, current_user.id)
