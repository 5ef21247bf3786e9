from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from drinkwithme.core.database import get_db
from drinkwithme.core.security import (
    verify_password,
    create_access_token,
    get_current_user
)
from drinkwithme.models.user_db.user_db import User
from drinkwithme.models.user_db.user_db_crud import create_user, delete_user, get_user_by_email
from drinkwithme.schemas.login.login_base import LoginRequest, TokenOut
from drinkwithme.schemas.users.user_base import UserCreate, UserOut

auth_router = APIRouter(prefix="/auth", tags=["Auth"])


@auth_router.post("/register", response_model=UserOut, status_code=201)
def register_user(user: UserCreate, db: Session = Depends(get_db)):
    if get_user_by_email(db, user.email):
        raise HTTPException(status_code=400, detail="Email already registered")
    return create_user(db, user)


@auth_router.post("/login", response_model=TokenOut)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user = get_user_by_email(db, payload.email)
    if not user or not verify_password(payload.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({"sub": str(user.id)})
    return {"user": user, "access_token": token}


@auth_router.get("/me", response_model=UserOut)
def get_me(current_user: User = Depends(get_current_user)):
    return current_user


@auth_router.delete("/me", response_model=UserOut)
def delete_me(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    user = delete_user(db, current_user.id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
