# -*- coding: utf-8 -*-
"""Logs - DB storage helpers + per-log macro math."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..errors import AppError
from ..foods.storage import get_visible_food
from ..utils import day_bounds, round_half_up, utc_now_iso, utc_today

MACRO_KEYS = ("calories", "protein", "carbs", "fats")

_FOOD_COLUMNS = (
    "id",
    "name",
    "brand",
    "serving_size",
    "calories",
    "protein",
    "carbs",
    "fats",
    "type",
    "image",
    "is_public",
    "created_by",
    "created_at",
)

_SELECT_LOGS = (
    "SELECT l.*, "
    + ", ".join(f"f.{c} AS food__{c}" for c in _FOOD_COLUMNS)
    + " FROM daily_logs l JOIN food_items f ON f.id = l.food_id"
)


def _log_from_row(row: Any) -> Dict[str, Any]:
    data = dict(row)
    food = {c: data.pop(f"food__{c}") for c in _FOOD_COLUMNS}
    data["food"] = food
    return data


def log_macros(log: Dict[str, Any]) -> Dict[str, int]:
    """Whole-gram (and whole-kcal) macros for one log entry."""
    food = log["food"]
    quantity = float(log["quantity"])
    return {k: round_half_up(float(food[k] or 0) * quantity) for k in MACRO_KEYS}


def sum_macros(logs: List[Dict[str, Any]]) -> Dict[str, int]:
    totals = {k: 0 for k in MACRO_KEYS}
    for log in logs:
        for k, v in log_macros(log).items():
            totals[k] += v
    return totals


def _timestamp_for(day: Optional[date]) -> str:
    if day is None or day == utc_today():
        return utc_now_iso()
    # Backdated entries are stamped at noon UTC.
    return f"{day.isoformat()}T12:00:00.000Z"


def add_log(
    *,
    user_id: str,
    food_id: str,
    quantity: float,
    meal_type: str,
    day: Optional[date] = None,
) -> Dict[str, Any]:
    food = get_visible_food(food_id, user_id)
    if not food:
        raise AppError("Food item not found", 404)

    row = {
        "id": str(uuid4()),
        "user_id": user_id,
        "food_id": food_id,
        "date": _timestamp_for(day),
        "meal_type": meal_type,
        "quantity": float(quantity),
        "created_at": utc_now_iso(),
    }
    with db_conn(settings.db_path) as conn:
        conn.execute(
            """
            INSERT INTO daily_logs (id, user_id, food_id, date, meal_type, quantity, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                row["id"],
                row["user_id"],
                row["food_id"],
                row["date"],
                row["meal_type"],
                row["quantity"],
                row["created_at"],
            ),
        )
    return {**row, "food": food}


def get_logs_between(user_id: str, start: str, end: str) -> List[Dict[str, Any]]:
    """Logs with ``start <= date <= end`` (ISO timestamps), oldest first."""
    with db_conn(settings.db_path) as conn:
        rows = conn.execute(
            f"{_SELECT_LOGS} WHERE l.user_id = ? AND l.date >= ? AND l.date <= ? ORDER BY l.date ASC, l.created_at ASC",
            (user_id, start, end),
        ).fetchall()
        return [_log_from_row(r) for r in rows]


def get_daily_summary(user_id: str, day: Optional[date] = None) -> Dict[str, Any]:
    day = day or utc_today()
    start, end = day_bounds(day)
    logs = get_logs_between(user_id, start, end)
    with_macros = [{**log, "macros": log_macros(log)} for log in logs]
    return {
        "date": day.isoformat(),
        "totals": sum_macros(logs),
        "logs": with_macros,
    }


def get_recent_logs(user_id: str, limit: int = 5) -> List[Dict[str, Any]]:
    with db_conn(settings.db_path) as conn:
        rows = conn.execute(
            f"{_SELECT_LOGS} WHERE l.user_id = ? ORDER BY l.date DESC, l.created_at DESC LIMIT ?",
            (user_id, int(limit)),
        ).fetchall()
        return [_log_from_row(r) for r in rows]


def delete_log(*, user_id: str, log_id: str) -> None:
    with db_conn(settings.db_path) as conn:
        row = conn.execute("SELECT user_id FROM daily_logs WHERE id = ?", (log_id,)).fetchone()
        if not row:
            raise AppError("Log not found", 404)
        if row["user_id"] != user_id:
            raise AppError("Unauthorized", 403)
        conn.execute("DELETE FROM daily_logs WHERE id = ?", (log_id,))


def clear_user_logs(user_id: str) -> int:
    with db_conn(settings.db_path) as conn:
        cur = conn.execute("DELETE FROM daily_logs WHERE user_id = ?", (user_id,))
        return cur.rowcount
