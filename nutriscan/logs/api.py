# -*- coding: utf-8 -*-
"""Logs - API endpoints."""

from __future__ import annotations

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from ..schemas import ApiResponse
from .models import DailySummary, DeleteResult, LogCreateRequest, LogPublic
from .storage import add_log, delete_log, get_daily_summary, get_recent_logs

router = APIRouter(prefix="/api/logs", tags=["Logs"])


@router.post("", status_code=201, response_model=ApiResponse[LogPublic], summary="Log a food")
def create_log(request: LogCreateRequest, user: dict = Depends(get_current_user)):
    log = add_log(
        user_id=user["id"],
        food_id=request.food_id,
        quantity=request.quantity,
        meal_type=request.meal_type.value,
        day=request.date,
    )
    return ApiResponse[LogPublic](data=LogPublic.model_validate(log))


@router.get("/today", response_model=ApiResponse[DailySummary], summary="Daily totals + logs")
def daily(
    day: date | None = Query(default=None, alias="date", description="YYYY-MM-DD, defaults to today (UTC)"),
    user: dict = Depends(get_current_user),
):
    summary = get_daily_summary(user["id"], day)
    return ApiResponse[DailySummary](data=DailySummary.model_validate(summary))


@router.get("/recent", response_model=ApiResponse[List[LogPublic]], summary="Five most recent logs")
def recent(user: dict = Depends(get_current_user)):
    logs = [LogPublic.model_validate(log) for log in get_recent_logs(user["id"])]
    return ApiResponse[List[LogPublic]](data=logs)


@router.delete("/{log_id}", response_model=ApiResponse[DeleteResult], summary="Delete one of my logs")
def remove_log(log_id: str, user: dict = Depends(get_current_user)):
    delete_log(user_id=user["id"], log_id=log_id)
    return ApiResponse[DeleteResult](data=DeleteResult(deleted=True))
