# -*- coding: utf-8 -*-
"""Daily calorie + macro targets (Mifflin-St Jeor BMR, sedentary TDEE)."""

from __future__ import annotations

from datetime import date
from typing import Dict

from ..utils import round_half_up

ACTIVITY_FACTOR = 1.2
GOAL_ADJUSTMENT_KCAL = {"lose": -500, "maintain": 0, "gain": 500}

PROTEIN_G_PER_KG = 2.0
FAT_G_PER_KG = 1.0

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


def age_on(date_of_birth: date, today: date) -> int:
    """Whole years between birth and ``today`` (0 for future dates)."""
    years = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        years -= 1
    return max(years, 0)


def basal_metabolic_rate(gender: str, weight: float, height: float, age: int) -> float:
    bmr = 10 * weight + 6.25 * height - 5 * age
    return bmr + (5 if gender == "male" else -161)


def calculate_targets(gender: str, weight: float, height: float, age: int, goal: str) -> Dict[str, int]:
    """Return target_calories / target_protein / target_carbs / target_fats.

    Protein and fat are fixed per kg of body weight; carbs take whatever
    calories remain and never go below zero.
    """
    tdee = basal_metabolic_rate(gender, weight, height, age) * ACTIVITY_FACTOR
    target_calories = round_half_up(tdee) + GOAL_ADJUSTMENT_KCAL.get(goal, 0)

    protein = round_half_up(weight * PROTEIN_G_PER_KG)
    fats = round_half_up(weight * FAT_G_PER_KG)
    remaining = target_calories - protein * KCAL_PER_G_PROTEIN - fats * KCAL_PER_G_FAT
    carbs = max(0, round_half_up(remaining / KCAL_PER_G_CARBS))

    return {
        "target_calories": target_calories,
        "target_protein": protein,
        "target_carbs": carbs,
        "target_fats": fats,
    }
