from uuid import UUID
from sqlalchemy.orm import Session
from drinkwithme.models.user_db.user_db import User
from drinkwithme.models.profile_db.profile_db import Profile
from drinkwithme.schemas.users.user_base import UserCreate
from drinkwithme.core.security import hash_password


def create_user(db: Session, user: UserCreate):
    db_user = User(
        email=user.email,
        hashed_password=hash_password(user.password),
    )
    db_user.profile = Profile(
        name=user.name,
        age=user.age,
        bio=user.bio,
        favorite_drink=user.favorite_drink,
        interests=user.interests or [],
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: UUID):
    return db.query(User).filter(User.id == user_id).first()


def delete_user(db: Session, user_id: UUID):
    user = get_user_by_id(db, user_id)
    if not user:
        return None
    db.delete(user)
    db.commit()
    return user
