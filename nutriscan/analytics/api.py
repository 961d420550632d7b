# -*- coding: utf-8 -*-
"""Analytics - API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from ..schemas import ApiResponse
from .models import AnalyticsSummary
from .storage import get_analytics_summary

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])


@router.get("/summary", response_model=ApiResponse[AnalyticsSummary], summary="Averages, targets and chart series")
def summary(
    days: int = Query(default=7, ge=1, le=365, description="Look-back window in days"),
    user: dict = Depends(get_current_user),
):
    data = get_analytics_summary(user["id"], days)
    return ApiResponse[AnalyticsSummary](data=AnalyticsSummary.model_validate(data))
