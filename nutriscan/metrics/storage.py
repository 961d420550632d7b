# -*- coding: utf-8 -*-
"""Metrics - one row of body metrics per user per day."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..utils import utc_now_iso


def get_metric(user_id: str, day: date) -> Optional[Dict[str, Any]]:
    with db_conn(settings.db_path) as conn:
        row = conn.execute(
            "SELECT * FROM daily_metrics WHERE user_id = ? AND date = ?",
            (user_id, day.isoformat()),
        ).fetchone()
        return dict(row) if row else None


def upsert_metric(
    *,
    user_id: str,
    day: date,
    weight_recorded: Optional[float] = None,
    water_intake: Optional[float] = None,
    sleep_minutes: Optional[int] = None,
) -> Dict[str, Any]:
    """Create or patch the metric row for ``day``; None keeps the stored value."""
    existing = get_metric(user_id, day) or {}
    row = {
        "id": existing.get("id") or str(uuid4()),
        "user_id": user_id,
        "date": day.isoformat(),
        "weight_recorded": weight_recorded if weight_recorded is not None else existing.get("weight_recorded"),
        "water_intake": water_intake if water_intake is not None else existing.get("water_intake", 0.0),
        "sleep_minutes": sleep_minutes if sleep_minutes is not None else existing.get("sleep_minutes", 0),
        "updated_at": utc_now_iso(),
    }
    with db_conn(settings.db_path) as conn:
        conn.execute(
            """
            INSERT INTO daily_metrics (id, user_id, date, weight_recorded, water_intake, sleep_minutes, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id, date) DO UPDATE SET
                weight_recorded = excluded.weight_recorded,
                water_intake = excluded.water_intake,
                sleep_minutes = excluded.sleep_minutes,
                updated_at = excluded.updated_at
            """,
            (
                row["id"],
                row["user_id"],
                row["date"],
                row["weight_recorded"],
                row["water_intake"],
                row["sleep_minutes"],
                row["updated_at"],
            ),
        )
    return row


def list_metrics(user_id: str, *, start: date, end: date) -> List[Dict[str, Any]]:
    with db_conn(settings.db_path) as conn:
        rows = conn.execute(
            """
            SELECT * FROM daily_metrics
            WHERE user_id = ? AND date >= ? AND date <= ?
            ORDER BY date ASC
            """,
            (user_id, start.isoformat(), end.isoformat()),
        ).fetchall()
        return [dict(r) for r in rows]


def clear_user_metrics(user_id: str) -> int:
    with db_conn(settings.db_path) as conn:
        cur = conn.execute("DELETE FROM daily_metrics WHERE user_id = ?", (user_id,))
        return cur.rowcount
