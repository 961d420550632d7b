# -*- coding: utf-8 -*-
"""Uploads - API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Request, UploadFile

from ..auth.security import get_current_user
from ..schemas import ApiResponse
from .models import UploadResult
from .storage import save_image_upload

router = APIRouter(prefix="/api/upload", tags=["Uploads"])


def _result(request: Request, stored: dict) -> ApiResponse[UploadResult]:
    url = str(request.base_url) + f"uploads/{stored['subdir']}/{stored['filename']}"
    return ApiResponse[UploadResult](data=UploadResult(url=url, filename=stored["filename"]))


@router.post("/avatar", response_model=ApiResponse[UploadResult], summary="Upload an avatar image")
def upload_avatar(
    request: Request,
    avatar: UploadFile | None = File(default=None),
    user: dict = Depends(get_current_user),
):
    return _result(request, save_image_upload(user_id=user["id"], upload=avatar, kind="avatar"))


@router.post("/food", response_model=ApiResponse[UploadResult], summary="Upload a food image")
def upload_food_image(
    request: Request,
    food: UploadFile | None = File(default=None),
    user: dict = Depends(get_current_user),
):
    return _result(request, save_image_upload(user_id=user["id"], upload=food, kind="food"))
