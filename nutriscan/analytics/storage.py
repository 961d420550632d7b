# -*- coding: utf-8 -*-
"""Analytics aggregation - daily totals, averages vs targets, chart series."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from ..logs.storage import MACRO_KEYS, get_logs_between, log_macros
from ..metrics.storage import list_metrics
from ..users.storage import get_profile
from ..utils import date_prefix, round_half_up, utc_now_iso, utc_today

GOAL_WEIGHT_DELTA_KG = 5.0


def _percent_of(value: float, target: Optional[float]) -> int:
    if not target or target <= 0:
        return 0
    return min(100, round_half_up(value / target * 100))


def _daily_totals(logs: List[Dict[str, Any]]) -> Dict[str, Dict[str, int]]:
    per_day: Dict[str, Dict[str, int]] = {}
    for log in logs:
        bucket = per_day.setdefault(date_prefix(log["date"]), {k: 0 for k in MACRO_KEYS})
        for k, v in log_macros(log).items():
            bucket[k] += v
    return per_day


def _goal_weight(profile: Optional[Dict[str, Any]]) -> Optional[float]:
    if not profile:
        return None
    weight = float(profile["weight"])
    if profile["main_goal"] == "lose":
        return weight - GOAL_WEIGHT_DELTA_KG
    if profile["main_goal"] == "gain":
        return weight + GOAL_WEIGHT_DELTA_KG
    return weight


def build_summary(
    *,
    logs: List[Dict[str, Any]],
    metrics: List[Dict[str, Any]],
    profile: Optional[Dict[str, Any]],
    days: int,
    today: date,
) -> Dict[str, Any]:
    """Aggregate already-loaded logs/metrics into the analytics payload.

    Averages divide by the number of days that have at least one log (1 when
    there are none), so empty days do not drag the averages down. Metrics are
    expected oldest first.
    """
    per_day = _daily_totals(logs)
    days_with_data = len(per_day) or 1
    totals = {k: sum(d[k] for d in per_day.values()) for k in MACRO_KEYS}
    averages = {k: round_half_up(totals[k] / days_with_data) for k in MACRO_KEYS}

    if metrics:
        water = sum(float(m["water_intake"] or 0) for m in metrics) / len(metrics)
        sleep = sum(int(m["sleep_minutes"] or 0) for m in metrics) / len(metrics)
    else:
        water = sleep = 0.0
    averages["water"] = round_half_up(water * 10) / 10
    averages["sleep_minutes"] = round_half_up(sleep)

    targets = None
    percentages = {"protein": 0, "carbs": 0, "fats": 0}
    if profile:
        targets = {
            "calories": profile["target_calories"],
            "protein": profile["target_protein"],
            "carbs": profile["target_carbs"],
            "fats": profile["target_fats"],
        }
        for k in percentages:
            percentages[k] = _percent_of(totals[k] / days_with_data, targets[k])

    history = [
        {"date": m["date"], "weight": float(m["weight_recorded"])}
        for m in metrics
        if m.get("weight_recorded") is not None
    ]
    if history:
        current: Optional[float] = history[-1]["weight"]
    else:
        current = float(profile["weight"]) if profile else None

    target_calories = targets["calories"] if targets else None
    chart: List[int] = []
    for offset in range(days - 1, -1, -1):
        key = (today - timedelta(days=offset)).isoformat()
        day_totals = per_day.get(key)
        chart.append(_percent_of(day_totals["calories"], target_calories) if day_totals else 0)

    return {
        "period": days,
        "averages": averages,
        "targets": targets,
        "macro_percentages": percentages,
        "weight": {"current": current, "goal": _goal_weight(profile), "history": history},
        "chart_data": chart,
    }


def get_analytics_summary(user_id: str, days: int = 7) -> Dict[str, Any]:
    today = utc_today()
    start_day = today - timedelta(days=days)
    logs = get_logs_between(user_id, f"{start_day.isoformat()}T00:00:00.000Z", utc_now_iso())
    metrics = list_metrics(user_id, start=start_day, end=today)
    return build_summary(
        logs=logs,
        metrics=metrics,
        profile=get_profile(user_id),
        days=days,
        today=today,
    )
