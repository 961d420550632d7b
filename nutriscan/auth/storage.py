# -*- coding: utf-8 -*-
"""Auth - DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..utils import utc_now_iso


def normalize_email(email: str) -> str:
    return email.lower().strip()


def get_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE email = ?", (normalize_email(email),)).fetchone()
        return dict(row) if row else None


def get_user_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return dict(row) if row else None


def create_user(*, email: str, password_hash: str, name: str, role: str = "user") -> Dict[str, Any]:
    user_id = str(uuid4())
    now = utc_now_iso()
    email_norm = normalize_email(email)
    with db_conn(settings.db_path) as conn:
        conn.execute(
            """
            INSERT INTO users (id, email, password_hash, name, avatar, role, created_at)
            VALUES (?, ?, ?, ?, NULL, ?, ?)
            """,
            (user_id, email_norm, password_hash, name, role, now),
        )
    return {
        "id": user_id,
        "email": email_norm,
        "password_hash": password_hash,
        "name": name,
        "avatar": None,
        "role": role,
        "created_at": now,
    }


def update_user_fields(user_id: str, *, name: Optional[str] = None, avatar: Optional[str] = None) -> None:
    sets = []
    params: list[Any] = []
    if name:
        sets.append("name = ?")
        params.append(name)
    if avatar:
        sets.append("avatar = ?")
        params.append(avatar)
    if not sets:
        return
    params.append(user_id)
    with db_conn(settings.db_path) as conn:
        conn.execute(f"UPDATE users SET {', '.join(sets)} WHERE id = ?", tuple(params))


def set_user_role(user_id: str, role: str) -> None:
    with db_conn(settings.db_path) as conn:
        conn.execute("UPDATE users SET role = ? WHERE id = ?", (role, user_id))


def list_users() -> list[Dict[str, Any]]:
    with db_conn(settings.db_path) as conn:
        rows = conn.execute("SELECT * FROM users ORDER BY created_at ASC").fetchall()
        return [dict(r) for r in rows]


def delete_user(user_id: str) -> bool:
    with db_conn(settings.db_path) as conn:
        # Private foods have no other audience; public ones outlive their creator (FK SET NULL).
        conn.execute("DELETE FROM food_items WHERE created_by = ? AND is_public = 0", (user_id,))
        cur = conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
        return cur.rowcount > 0
