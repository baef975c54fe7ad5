"""Schemas for users and authentication"""
from typing import Literal, Optional

from pydantic import EmailStr, Field

from proma.schemas.base import CamelModel


class UserResponse(CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str
    is_pm: bool


class UserRegister(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=5, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    is_pm: bool = False

    class Config:
        extra = "forbid"


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserUpdate(CamelModel):
    """Fields a user may change on their own account."""

    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    password: Optional[str] = Field(None, min_length=5, max_length=128)

    class Config:
        extra = "forbid"


class UserPromote(CamelModel):
    is_pm: Literal[True]

    class Config:
        extra = "forbid"


class AuthResponse(CamelModel):
    token: str
    user: UserResponse
