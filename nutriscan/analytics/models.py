# -*- coding: utf-8 -*-
"""Analytics - Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..schemas import CamelModel


class Averages(CamelModel):
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fats: int = 0
    water: float = Field(0.0, description="litres per day, one decimal")
    sleep_minutes: int = 0


class Targets(CamelModel):
    calories: int
    protein: int
    carbs: int
    fats: int


class MacroPercentages(CamelModel):
    protein: int = Field(0, ge=0, le=100)
    carbs: int = Field(0, ge=0, le=100)
    fats: int = Field(0, ge=0, le=100)


class WeightPoint(CamelModel):
    date: str
    weight: float


class WeightSummary(CamelModel):
    current: Optional[float] = None
    goal: Optional[float] = None
    history: List[WeightPoint] = Field(default_factory=list)


class AnalyticsSummary(CamelModel):
    period: int
    averages: Averages
    targets: Optional[Targets] = None
    macro_percentages: MacroPercentages
    weight: WeightSummary
    chart_data: List[int] = Field(..., description="Daily calories as % of target, oldest first")
