# -*- coding: utf-8 -*-
"""Auth - API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from ..errors import AppError
from ..schemas import ApiResponse
from ..users.storage import get_profile
from .models import (
    CheckEmailRequest,
    EmailAvailability,
    LoginRequest,
    LoginResult,
    RegisterRequest,
    RegisterResult,
    UserDetail,
    UserPublic,
)
from .security import create_access_token, hash_password, verify_password
from .storage import create_user, get_user_by_email

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])

_BAD_CREDENTIALS = "Incorrect email or password"


@router.post("/register", status_code=201, response_model=ApiResponse[RegisterResult], summary="Register a new user")
def register(request: RegisterRequest):
    if get_user_by_email(request.email):
        raise AppError("Email already in use", 400)

    user = create_user(email=request.email, password_hash=hash_password(request.password), name=request.name)
    logger.info("Registered user %s", user["id"])

    token = create_access_token(user_id=user["id"])
    result = RegisterResult(user=UserPublic.model_validate(user), token=token)
    return ApiResponse[RegisterResult](data=result)


@router.post("/login", response_model=ApiResponse[LoginResult], summary="Login")
def login(request: LoginRequest):
    user = get_user_by_email(request.email)
    if not user or not verify_password(request.password, user["password_hash"]):
        logger.info("Failed login for %s", request.email)
        raise AppError(_BAD_CREDENTIALS, 401)

    detail = UserDetail.model_validate({**user, "profile": get_profile(user["id"])})
    token = create_access_token(user_id=user["id"])
    return ApiResponse[LoginResult](data=LoginResult(user=detail, token=token))


@router.post("/check-email", response_model=ApiResponse[EmailAvailability], summary="Check if an email is free")
def check_email(request: CheckEmailRequest):
    if not request.email or not request.email.strip():
        raise AppError("Email is required", 400)
    available = get_user_by_email(request.email) is None
    return ApiResponse[EmailAvailability](data=EmailAvailability(available=available))
