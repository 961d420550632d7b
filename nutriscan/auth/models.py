# -*- coding: utf-8 -*-
"""Auth - Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..schemas import CamelModel
from ..users.models import ProfilePublic

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequest(CamelModel):
    email: str = Field(..., max_length=254, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6, max_length=128)
    name: str = Field(..., min_length=2, max_length=100)


class LoginRequest(CamelModel):
    email: str = Field(..., max_length=254, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1, max_length=128)


class CheckEmailRequest(CamelModel):
    email: Optional[str] = Field(None, max_length=254)


class UserPublic(CamelModel):
    id: str
    email: str
    name: str


class UserDetail(CamelModel):
    id: str
    email: str
    name: str
    avatar: Optional[str] = None
    role: str
    created_at: str
    profile: Optional[ProfilePublic] = None


class RegisterResult(CamelModel):
    user: UserPublic
    token: str


class LoginResult(CamelModel):
    user: UserDetail
    token: str


class EmailAvailability(CamelModel):
    available: bool
