from typing import Optional
from app.schemas.base import CamelModel


class UserRegister(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class UserLogin(CamelModel):
    email: str
    password: str


class UserResponse(CamelModel):
    id: int
    email: str
    name: Optional[str] = None


class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"


class SessionResponse(CamelModel):
    user: UserResponse
