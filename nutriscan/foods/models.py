# -*- coding: utf-8 -*-
"""Foods - Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..schemas import ApiResponse, CamelModel


class FoodPublic(CamelModel):
    id: str
    name: str
    brand: Optional[str] = None
    serving_size: str
    calories: float
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    type: str = "local"
    image: Optional[str] = None
    is_public: bool = False
    created_by: Optional[str] = None
    created_at: str


class FoodCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    calories: float = Field(..., ge=0, description="kcal per serving")
    protein: Optional[float] = Field(None, ge=0)
    carbs: Optional[float] = Field(None, ge=0)
    fats: Optional[float] = Field(None, ge=0)
    serving_size: Optional[str] = Field(None, max_length=100)
    brand: Optional[str] = Field(None, max_length=200)
    image: Optional[str] = Field(None, max_length=2048)
    type: Optional[str] = Field(None, max_length=32)


class FoodUpdateRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    calories: Optional[float] = Field(None, ge=0)
    protein: Optional[float] = Field(None, ge=0)
    carbs: Optional[float] = Field(None, ge=0)
    fats: Optional[float] = Field(None, ge=0)
    serving_size: Optional[str] = Field(None, max_length=100)
    brand: Optional[str] = Field(None, max_length=200)
    image: Optional[str] = Field(None, max_length=2048)
    type: Optional[str] = Field(None, max_length=32)
    is_public: Optional[bool] = None


class FoodListResponse(ApiResponse[List[FoodPublic]]):
    results: int
