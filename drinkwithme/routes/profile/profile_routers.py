from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Body
from sqlalchemy.orm import Session

from drinkwithme.core.database import get_db
from drinkwithme.core.security import get_current_user
from drinkwithme.models.user_db.user_db import User
from drinkwithme.models.profile_db.profile_crud import get_profile_by_user_id, update_profile
from drinkwithme.schemas.profile.profile_base import ProfileOut, ProfileUpdate

profile_router = APIRouter(prefix="/profiles", tags=["Profiles"])


@profile_router.get("/{user_id}", response_model=ProfileOut)
def get_profile(user_id: UUID, db: Session = Depends(get_db)):
    profile = get_profile_by_user_id(db, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@profile_router.put("/me", response_model=ProfileOut)
def edit_my_profile(
    updates: ProfileUpdate = Body(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    profile = update_profile(db, current_user.id, updates)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile
