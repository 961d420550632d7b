# -*- coding: utf-8 -*-
"""Small shared helpers (time + rounding)."""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(dt: datetime) -> str:
    """Millisecond ISO-8601 in UTC with a trailing Z (sorts lexicographically)."""
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return to_iso(utc_now())


def utc_today() -> date:
    return utc_now().date()


def day_bounds(day: date) -> tuple[str, str]:
    """Inclusive [start, end] timestamps covering one UTC calendar day."""
    d = day.isoformat()
    return f"{d}T00:00:00.000Z", f"{d}T23:59:59.999Z"


def date_prefix(iso8601: Optional[str]) -> str:
    return (iso8601 or "")[:10]


def round_half_up(value: float) -> int:
    # Same as JavaScript Math.round: 2.5 -> 3, -2.5 -> -2.
    return int(math.floor(value + 0.5))
