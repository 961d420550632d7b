# -*- coding: utf-8 -*-
"""Logs - Pydantic models."""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from ..foods.models import FoodPublic
from ..schemas import CamelModel


class MealType(str, Enum):
    breakfast = "BREAKFAST"
    lunch = "LUNCH"
    dinner = "DINNER"
    snack = "SNACK"


class LogCreateRequest(CamelModel):
    food_id: str = Field(..., min_length=1)
    quantity: float = Field(..., ge=0.1, le=100, description="Servings")
    meal_type: MealType
    date: Optional[dt.date] = Field(None, description="YYYY-MM-DD or an ISO timestamp; omit for now")

    @field_validator("date", mode="before")
    @classmethod
    def _timestamp_to_day(cls, value: object) -> object:
        """Clients may send a full ISO timestamp; keep only its UTC calendar day."""
        if isinstance(value, str) and "T" in value:
            parsed = dt.datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone(dt.timezone.utc)
            return parsed.date()
        return value


class Macros(CamelModel):
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fats: int = 0


class LogPublic(CamelModel):
    id: str
    user_id: str
    food_id: str
    date: str
    meal_type: MealType
    quantity: float
    created_at: str
    food: FoodPublic


class LogWithMacros(LogPublic):
    macros: Macros


class DailySummary(CamelModel):
    date: str = Field(..., description="YYYY-MM-DD")
    totals: Macros
    logs: List[LogWithMacros]


class DeleteResult(CamelModel):
    deleted: bool
