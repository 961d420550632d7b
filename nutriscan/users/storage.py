# -*- coding: utf-8 -*-
"""Users - profile storage + create/update rules."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from ..app_db import db_conn
from ..auth.storage import update_user_fields
from ..config import settings
from ..errors import AppError
from ..utils import utc_now_iso, utc_today
from .models import ProfileUpdateRequest
from .targets import age_on, calculate_targets

_METRIC_FIELDS = ("gender", "date_of_birth", "height", "weight", "main_goal")


def _profile_from_row(row: Any) -> Dict[str, Any]:
    data = dict(row)
    owner = {
        "name": data.pop("owner_name"),
        "email": data.pop("owner_email"),
        "avatar": data.pop("owner_avatar"),
        "role": data.pop("owner_role"),
    }
    data["user"] = owner
    return data


def get_profile(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.db_path) as conn:
        row = conn.execute(
            """
            SELECT p.*, u.name AS owner_name, u.email AS owner_email,
                   u.avatar AS owner_avatar, u.role AS owner_role
            FROM user_profiles p
            JOIN users u ON u.id = p.user_id
            WHERE p.user_id = ?
            """,
            (user_id,),
        ).fetchone()
        return _profile_from_row(row) if row else None


def _save_profile(user_id: str, fields: Dict[str, Any]) -> None:
    dob = date.fromisoformat(fields["date_of_birth"])
    targets = calculate_targets(
        fields["gender"],
        float(fields["weight"]),
        float(fields["height"]),
        age_on(dob, utc_today()),
        fields["main_goal"],
    )
    now = utc_now_iso()
    with db_conn(settings.db_path) as conn:
        conn.execute(
            """
            INSERT INTO user_profiles (
                user_id, gender, date_of_birth, height, weight, main_goal,
                target_calories, target_protein, target_carbs, target_fats, updated_at
            )
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                gender = excluded.gender,
                date_of_birth = excluded.date_of_birth,
                height = excluded.height,
                weight = excluded.weight,
                main_goal = excluded.main_goal,
                target_calories = excluded.target_calories,
                target_protein = excluded.target_protein,
                target_carbs = excluded.target_carbs,
                target_fats = excluded.target_fats,
                updated_at = excluded.updated_at
            """,
            (
                user_id,
                fields["gender"],
                fields["date_of_birth"],
                float(fields["height"]),
                float(fields["weight"]),
                fields["main_goal"],
                targets["target_calories"],
                targets["target_protein"],
                targets["target_carbs"],
                targets["target_fats"],
                now,
            ),
        )


def create_or_update_profile(user_id: str, request: ProfileUpdateRequest) -> Optional[Dict[str, Any]]:
    """Apply a profile update.

    Name/avatar always go to the user row. Body metrics either replace the
    profile (all given), merge over the existing one (some given) or are left
    alone (none given). Targets are recomputed whenever metrics change.
    """
    update_user_fields(user_id, name=request.name, avatar=request.avatar)

    given = {k: v for k, v in request.metric_fields().items() if v is not None}
    if not given:
        return get_profile(user_id)

    if len(given) < len(_METRIC_FIELDS):
        existing = get_profile(user_id)
        if not existing:
            raise AppError("Full profile data required for new profile creation", 400)
        merged = {k: existing[k] for k in _METRIC_FIELDS}
        merged.update(given)
    else:
        merged = given

    _save_profile(user_id, merged)
    return get_profile(user_id)
