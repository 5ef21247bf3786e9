from uuid import UUID
from typing import Iterable, List
from sqlalchemy.orm import Session
from drinkwithme.models.profile_db.profile_db import Profile
from drinkwithme.schemas.profile.profile_base import ProfileUpdate


def get_profile_by_user_id(db: Session, user_id: UUID):
    return db.query(Profile).filter(Profile.user_id == user_id).first()


def get_profiles_by_user_ids(db: Session, user_ids: Iterable[UUID]) -> List[Profile]:
    user_ids = list(user_ids)
    if not user_ids:
        return []
    return db.query(Profile).filter(Profile.user_id.in_(user_ids)).all()


def update_profile(db: Session, user_id: UUID, updates: ProfileUpdate):
    profile = get_profile_by_user_id(db, user_id)
    if not profile:
        return None

    for field, value in updates.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(profile, field, value)

    db.commit()
    db.refresh(profile)
    return profile
