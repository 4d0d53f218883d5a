# app/schemas/user_schemas.py
from typing import Optional
from datetime import datetime

from app.schemas.response_schemas import CamelModel


class UserLogin(CamelModel):
    username: str
    password: str


class LoginUser(CamelModel):
    id: int
    username: str
    name: Optional[str] = None
    role: str


class LoginResponse(CamelModel):
    token: str
    user: LoginUser
    result: bool = True


class ChangePassword(CamelModel):
    password: str
    new_password: str


class UserCreate(CamelModel):
    username: str
    password: str
    name: Optional[str] = None
    role: str = "user"
    enabled: bool = True


class UserUpdate(CamelModel):
    name: Optional[str] = None
    role: Optional[str] = None
    enabled: Optional[bool] = None
    password: Optional[str] = None


class UserOut(CamelModel):
    id: int
    username: str
    name: Optional[str] = None
    role: str
    enabled: bool
    created_at: Optional[datetime] = None
