from pydantic import BaseModel
from drinkwithme.schemas.users.user_base import UserOut


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenOut(BaseModel):
    user: UserOut
    access_token: str
    token_type: str = "bearer"
