# -*- coding: utf-8 -*-
"""Dev - helper endpoints for local testing (mounted only when dev routes are enabled)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from ..auth.security import get_current_user
from ..auth.storage import set_user_role
from ..schemas import CamelModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dev", tags=["Dev"])


class RoleData(CamelModel):
    role: str


class ToggleRoleResponse(CamelModel):
    status: str = "success"
    message: str
    data: RoleData


@router.post("/toggle-role", response_model=ToggleRoleResponse, summary="Switch between user and admin")
def toggle_role(user: dict = Depends(get_current_user)):
    new_role = "user" if user.get("role") == "admin" else "admin"
    set_user_role(user["id"], new_role)
    logger.info("User %s switched role to %s", user["id"], new_role)
    return ToggleRoleResponse(message=f"Role switched to {new_role}", data=RoleData(role=new_role))
