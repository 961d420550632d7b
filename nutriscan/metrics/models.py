# -*- coding: utf-8 -*-
"""Metrics - Pydantic models."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import Field

from ..schemas import CamelModel


class MetricUpsertRequest(CamelModel):
    date: Optional[dt.date] = Field(None, description="YYYY-MM-DD, defaults to today (UTC)")
    weight_recorded: Optional[float] = Field(None, ge=20, le=500, description="kg")
    water_intake: Optional[float] = Field(None, ge=0, le=20, description="litres")
    sleep_minutes: Optional[int] = Field(None, ge=0, le=24 * 60)


class MetricPublic(CamelModel):
    id: str
    user_id: str
    date: str
    weight_recorded: Optional[float] = None
    water_intake: float = 0.0
    sleep_minutes: int = 0
    updated_at: str
