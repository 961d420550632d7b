# -*- coding: utf-8 -*-
"""Foods - DB storage helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..utils import utc_now_iso

CATALOG_FILE = Path(__file__).resolve().parent / "catalog.json"

DEFAULT_SERVING_SIZE = "1 serving"
DEFAULT_FOOD_TYPE = "local"

_UPDATABLE_COLUMNS = (
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
)
_NULLABLE_COLUMNS = ("brand", "image")


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def list_foods(*, user_id: str, food_type: Optional[str] = None, search: Optional[str] = None) -> List[Dict[str, Any]]:
    """Catalog listing.

    ``personal`` lists the caller's private foods; anything else lists public
    foods, narrowed to ``food_type`` unless it is empty or ``all``.
    """
    if food_type == "personal":
        sql = "SELECT * FROM food_items WHERE created_by = ? AND is_public = 0"
        params: List[Any] = [user_id]
    else:
        sql = "SELECT * FROM food_items WHERE is_public = 1"
        params = []
        if food_type and food_type != "all":
            sql += " AND type = ?"
            params.append(food_type)

    term = (search or "").strip().lower()
    if term:
        sql += " AND lower(name) LIKE ? ESCAPE '\\'"
        params.append(f"%{_escape_like(term)}%")

    sql += " ORDER BY name ASC"
    with db_conn(settings.db_path) as conn:
        rows = conn.execute(sql, tuple(params)).fetchall()
        return [dict(r) for r in rows]


def get_food(food_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.db_path) as conn:
        row = conn.execute("SELECT * FROM food_items WHERE id = ?", (food_id,)).fetchone()
        return dict(row) if row else None


def get_visible_food(food_id: str, user_id: str) -> Optional[Dict[str, Any]]:
    """A food the user may log: public, or private and their own."""
    food = get_food(food_id)
    if not food:
        return None
    if not food["is_public"] and food["created_by"] != user_id:
        return None
    return food


def create_food(
    *,
    name: str,
    calories: float,
    created_by: Optional[str],
    is_public: bool,
    protein: Optional[float] = None,
    carbs: Optional[float] = None,
    fats: Optional[float] = None,
    serving_size: Optional[str] = None,
    brand: Optional[str] = None,
    image: Optional[str] = None,
    food_type: Optional[str] = None,
) -> Dict[str, Any]:
    row = {
        "id": str(uuid4()),
        "name": name,
        "brand": brand,
        "serving_size": serving_size or DEFAULT_SERVING_SIZE,
        "calories": float(calories),
        "protein": float(protein or 0),
        "carbs": float(carbs or 0),
        "fats": float(fats or 0),
        "type": food_type or DEFAULT_FOOD_TYPE,
        "image": image,
        "is_public": 1 if is_public else 0,
        "created_by": created_by,
        "created_at": utc_now_iso(),
    }
    with db_conn(settings.db_path) as conn:
        _insert_food(conn, row)
    return row


def _insert_food(conn: Any, row: Dict[str, Any]) -> None:
    conn.execute(
        """
        INSERT INTO food_items (
            id, name, brand, serving_size, calories, protein, carbs, fats,
            type, image, is_public, created_by, created_at
        )
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            row["id"],
            row["name"],
            row["brand"],
            row["serving_size"],
            row["calories"],
            row["protein"],
            row["carbs"],
            row["fats"],
            row["type"],
            row["image"],
            row["is_public"],
            row["created_by"],
            row["created_at"],
        ),
    )


def update_food(food_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    changes = {
        k: v
        for k, v in fields.items()
        if k in _UPDATABLE_COLUMNS and (v is not None or k in _NULLABLE_COLUMNS)
    }
    if "is_public" in changes:
        changes["is_public"] = 1 if changes["is_public"] else 0
    if changes:
        assignments = ", ".join(f"{col} = ?" for col in changes)
        with db_conn(settings.db_path) as conn:
            conn.execute(
                f"UPDATE food_items SET {assignments} WHERE id = ?",
                (*changes.values(), food_id),
            )
    return get_food(food_id)


def delete_food(food_id: str) -> bool:
    with db_conn(settings.db_path) as conn:
        cur = conn.execute("DELETE FROM food_items WHERE id = ?", (food_id,))
        return cur.rowcount > 0


def load_catalog(path: Path | None = None) -> List[Dict[str, Any]]:
    return json.loads((path or CATALOG_FILE).read_text(encoding="utf-8"))


def replace_catalog(items: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Swap the unowned public catalog for ``items``; user foods are untouched."""
    now = utc_now_iso()
    created: List[Dict[str, Any]] = []
    with db_conn(settings.db_path) as conn:
        conn.execute("DELETE FROM food_items WHERE created_by IS NULL AND is_public = 1")
        for item in items:
            row = {
                "id": str(uuid4()),
                "name": item["name"],
                "brand": item.get("brand"),
                "serving_size": item.get("serving_size") or DEFAULT_SERVING_SIZE,
                "calories": float(item["calories"]),
                "protein": float(item.get("protein") or 0),
                "carbs": float(item.get("carbs") or 0),
                "fats": float(item.get("fats") or 0),
                "type": item.get("type") or DEFAULT_FOOD_TYPE,
                "image": item.get("image"),
                "is_public": 1,
                "created_by": None,
                "created_at": now,
            }
            _insert_food(conn, row)
            created.append(row)
    return created
