# -*- coding: utf-8 -*-
"""Users - API endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from ..auth.security import get_current_user
from ..auth.storage import delete_user
from ..errors import AppError
from ..schemas import ApiResponse, MessageResponse
from .models import ProfilePublic, ProfileUpdateRequest
from .storage import create_or_update_profile, get_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("/profile", response_model=ApiResponse[ProfilePublic], summary="Get my profile")
def read_profile(user: dict = Depends(get_current_user)):
    profile = get_profile(user["id"])
    if not profile:
        raise AppError("Profile not found", 404)
    return ApiResponse[ProfilePublic](data=ProfilePublic.model_validate(profile))


@router.put("/profile", response_model=ApiResponse[Optional[ProfilePublic]], summary="Create or update my profile")
def update_profile(request: ProfileUpdateRequest, user: dict = Depends(get_current_user)):
    profile = create_or_update_profile(user["id"], request)
    data = ProfilePublic.model_validate(profile) if profile else None
    return ApiResponse[Optional[ProfilePublic]](data=data)


@router.delete("/profile", response_model=MessageResponse, summary="Delete my account")
def delete_account(user: dict = Depends(get_current_user)):
    delete_user(user["id"])
    logger.info("Deleted account %s", user["id"])
    return MessageResponse(message="Account deleted successfully")
