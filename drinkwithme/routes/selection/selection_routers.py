from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from drinkwithme.core.config import settings
from drinkwithme.core.database import get_db
from drinkwithme.core.security import get_current_user
from drinkwithme.models.user_db.user_db import User
from drinkwithme.models.selection_db.selection_crud import get_selections, replace_selections
from drinkwithme.models.venue_db.venue_crud import get_unselectable_venue_ids
from drinkwithme.schemas.selection.selection_base import SelectionIn, SelectionOut

selection_router = APIRouter(prefix="/selections", tags=["Selections"])


@selection_router.get("/me", response_model=SelectionOut)
def my_selections(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    venue_ids = sorted(get_selections(db, current_user.id), key=str)
    return SelectionOut(user_id=current_user.id, venue_ids=venue_ids)


@selection_router.put("/me", response_model=SelectionOut)
def set_my_selections(
    payload: SelectionIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    venue_ids = list(dict.fromkeys(payload.venue_ids))
    if len(venue_ids) > settings.MAX_SELECTED_VENUES:
        raise HTTPException(
            status_code=400,
            detail=f"At most {settings.MAX_SELECTED_VENUES} venues can be selected",
        )

    unknown = get_unselectable_venue_ids(db, venue_ids)
    if unknown:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown or unapproved venues: {', '.join(str(v) for v in unknown)}",
        )

    stored = replace_selections(db, current_user.id, venue_ids)
    return SelectionOut(user_id=current_user.id, venue_ids=stored)
