# -*- coding: utf-8 -*-
"""Users - Pydantic models."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import Field

from ..schemas import CamelModel


class Gender(str, Enum):
    male = "male"
    female = "female"


class MainGoal(str, Enum):
    lose = "lose"
    maintain = "maintain"
    gain = "gain"


class ProfileOwner(CamelModel):
    name: str
    email: str
    avatar: Optional[str] = None
    role: str


class ProfilePublic(CamelModel):
    user_id: str
    gender: Gender
    date_of_birth: str = Field(..., description="YYYY-MM-DD")
    height: float
    weight: float
    main_goal: MainGoal
    target_calories: int
    target_protein: int
    target_carbs: int
    target_fats: int
    updated_at: str
    user: Optional[ProfileOwner] = None


class ProfileUpdateRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    avatar: Optional[str] = Field(None, max_length=2048)
    gender: Optional[Gender] = None
    date_of_birth: Optional[date] = None
    height: Optional[float] = Field(None, ge=50, le=300, description="cm")
    weight: Optional[float] = Field(None, ge=20, le=500, description="kg")
    main_goal: Optional[MainGoal] = None

    def metric_fields(self) -> dict:
        return {
            "gender": self.gender.value if self.gender else None,
            "date_of_birth": self.date_of_birth.isoformat() if self.date_of_birth else None,
            "height": self.height,
            "weight": self.weight,
            "main_goal": self.main_goal.value if self.main_goal else None,
        }
