# -*- coding: utf-8 -*-
"""Metrics - API endpoints."""

from __future__ import annotations

from datetime import date, timedelta
from typing import List

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from ..errors import AppError
from ..schemas import ApiResponse
from ..utils import utc_today
from .models import MetricPublic, MetricUpsertRequest
from .storage import list_metrics, upsert_metric

router = APIRouter(prefix="/api/metrics", tags=["Metrics"])

DEFAULT_RANGE_DAYS = 30


@router.put("", response_model=ApiResponse[MetricPublic], summary="Record weight / water / sleep for a day")
def record_metric(request: MetricUpsertRequest, user: dict = Depends(get_current_user)):
    row = upsert_metric(
        user_id=user["id"],
        day=request.date or utc_today(),
        weight_recorded=request.weight_recorded,
        water_intake=request.water_intake,
        sleep_minutes=request.sleep_minutes,
    )
    return ApiResponse[MetricPublic](data=MetricPublic.model_validate(row))


@router.get("", response_model=ApiResponse[List[MetricPublic]], summary="List my daily metrics")
def read_metrics(
    start: date | None = Query(default=None, description="YYYY-MM-DD"),
    end: date | None = Query(default=None, description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
):
    end_day = end or utc_today()
    start_day = start or (end_day - timedelta(days=DEFAULT_RANGE_DAYS))
    if start_day > end_day:
        raise AppError("start must not be after end", 400)
    rows = list_metrics(user["id"], start=start_day, end=end_day)
    return ApiResponse[List[MetricPublic]](data=[MetricPublic.model_validate(r) for r in rows])
