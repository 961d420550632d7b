# -*- coding: utf-8 -*-
"""Foods - API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response

from ..auth.security import get_current_user, is_admin
from ..errors import AppError
from ..schemas import ApiResponse
from .models import FoodCreateRequest, FoodListResponse, FoodPublic, FoodUpdateRequest
from .storage import create_food, delete_food, get_food, list_foods, update_food

router = APIRouter(prefix="/api/foods", tags=["Foods"])


def _food_or_404(food_id: str) -> dict:
    food = get_food(food_id)
    if not food:
        raise AppError("Food not found", 404)
    return food


def _check_can_modify(food: dict, user: dict, action: str) -> None:
    if not is_admin(user) and food["created_by"] != user["id"]:
        raise AppError(f"You do not have permission to {action} this food", 403)


@router.get("", response_model=FoodListResponse, summary="List foods (public catalog or personal)")
def list_all_foods(
    type: str | None = Query(default=None, description="personal | all | <catalog type>"),
    search: str | None = Query(default=None, max_length=100),
    user: dict = Depends(get_current_user),
):
    rows = list_foods(user_id=user["id"], food_type=type, search=search)
    foods = [FoodPublic.model_validate(r) for r in rows]
    return FoodListResponse(results=len(foods), data=foods)


@router.post("", status_code=201, response_model=ApiResponse[FoodPublic], summary="Create a food")
def create(request: FoodCreateRequest, user: dict = Depends(get_current_user)):
    # Admins curate the public catalog; everyone else gets a private food.
    row = create_food(
        name=request.name,
        calories=request.calories,
        protein=request.protein,
        carbs=request.carbs,
        fats=request.fats,
        serving_size=request.serving_size,
        brand=request.brand,
        image=request.image,
        food_type=request.type,
        is_public=is_admin(user),
        created_by=user["id"],
    )
    return ApiResponse[FoodPublic](data=FoodPublic.model_validate(row))


@router.patch("/{food_id}", response_model=ApiResponse[FoodPublic], summary="Update a food")
def update(food_id: str, request: FoodUpdateRequest, user: dict = Depends(get_current_user)):
    food = _food_or_404(food_id)
    _check_can_modify(food, user, "edit")

    fields = request.model_dump(exclude_unset=True)
    if "is_public" in fields and not is_admin(user):
        raise AppError("Only admins can change food visibility", 403)

    row = update_food(food_id, fields)
    if not row:
        raise AppError("Food not found", 404)
    return ApiResponse[FoodPublic](data=FoodPublic.model_validate(row))


@router.delete("/{food_id}", status_code=204, summary="Delete a food")
def remove(food_id: str, user: dict = Depends(get_current_user)):
    food = _food_or_404(food_id)
    _check_can_modify(food, user, "delete")
    delete_food(food_id)
    return Response(status_code=204)
