# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date

from support import ApiTestCase


def _log(day: str, quantity: float, calories: float, protein: float = 0.0) -> dict:
    return {
        "date": f"{day}T12:00:00.000Z",
        "quantity": quantity,
        "food": {"calories": calories, "protein": protein, "carbs": 0.0, "fats": 0.0},
    }


PROFILE = {
    "weight": 82.0,
    "main_goal": "lose",
    "target_calories": 2000,
    "target_protein": 150,
    "target_carbs": 200,
    "target_fats": 70,
}


class TestBuildSummary(unittest.TestCase):
    today = date(2024, 3, 10)

    def _summary(self, **kwargs) -> dict:
        from nutriscan.analytics.storage import build_summary

        params = {"logs": [], "metrics": [], "profile": None, "days": 7, "today": self.today}
        params.update(kwargs)
        return build_summary(**params)

    def test_averages_use_days_with_logs(self) -> None:
        logs = [
            _log("2024-03-09", 1, 500, protein=30),
            _log("2024-03-09", 2, 500, protein=30),
            _log("2024-03-10", 1, 1000, protein=30),
        ]
        summary = self._summary(logs=logs, profile=PROFILE)

        self.assertEqual(summary["period"], 7)
        self.assertEqual(summary["averages"]["calories"], 1250)
        self.assertEqual(summary["averages"]["protein"], 60)
        self.assertEqual(summary["macro_percentages"], {"protein": 40, "carbs": 0, "fats": 0})
        self.assertEqual(summary["chart_data"], [0, 0, 0, 0, 0, 75, 50])

    def test_chart_and_percentages_are_capped(self) -> None:
        logs = [_log("2024-03-10", 3, 1000, protein=100)]
        summary = self._summary(logs=logs, profile=PROFILE)
        self.assertEqual(summary["chart_data"][-1], 100)
        self.assertEqual(summary["macro_percentages"]["protein"], 100)

    def test_metrics_and_weight(self) -> None:
        metrics = [
            {"date": "2024-03-08", "weight_recorded": 80.0, "water_intake": 2.0, "sleep_minutes": 420},
            {"date": "2024-03-09", "weight_recorded": None, "water_intake": 2.5, "sleep_minutes": 480},
        ]
        summary = self._summary(metrics=metrics, profile=PROFILE)

        self.assertEqual(summary["averages"]["water"], 2.3)
        self.assertEqual(summary["averages"]["sleep_minutes"], 450)
        self.assertEqual(summary["weight"]["history"], [{"date": "2024-03-08", "weight": 80.0}])
        self.assertEqual(summary["weight"]["current"], 80.0)
        self.assertEqual(summary["weight"]["goal"], 77.0)

    def test_without_profile(self) -> None:
        summary = self._summary(logs=[_log("2024-03-10", 1, 800)])

        self.assertIsNone(summary["targets"])
        self.assertEqual(summary["macro_percentages"], {"protein": 0, "carbs": 0, "fats": 0})
        self.assertEqual(summary["chart_data"], [0] * 7)
        self.assertIsNone(summary["weight"]["current"])
        self.assertIsNone(summary["weight"]["goal"])
        self.assertEqual(summary["averages"]["calories"], 800)

    def test_empty_window(self) -> None:
        summary = self._summary(days=30)
        self.assertEqual(len(summary["chart_data"]), 30)
        self.assertEqual(summary["averages"]["calories"], 0)
        self.assertEqual(summary["averages"]["water"], 0)


class TestAnalyticsApi(ApiTestCase):
    def test_summary_endpoint(self) -> None:
        user = self.register("analytics@example.com")
        self.create_profile(user)
        food = self.create_food(user, name="Toast", calories=300, protein=10)
        resp = self.client.post(
            "/api/logs",
            json={"foodId": food["id"], "quantity": 2, "mealType": "BREAKFAST"},
            headers=self.auth(user),
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        self.client.put("/api/metrics", json={"weightRecorded": 79.5, "waterIntake": 2}, headers=self.auth(user))

        resp = self.client.get("/api/analytics/summary?days=14", headers=self.auth(user))
        self.assertEqual(resp.status_code, 200, resp.text)
        data = resp.json()["data"]
        self.assertEqual(data["period"], 14)
        self.assertEqual(len(data["chartData"]), 14)
        self.assertEqual(data["averages"]["calories"], 600)
        target = data["targets"]["calories"]
        self.assertGreater(target, 0)
        self.assertEqual(data["chartData"][-1], min(100, int(600 / target * 100 + 0.5)))
        self.assertEqual(data["weight"]["current"], 79.5)
        self.assertEqual(data["weight"]["goal"], 80.0)
        self.assertIn("macroPercentages", data)

    def test_days_out_of_range(self) -> None:
        user = self.register("analytics-range@example.com")
        resp = self.client.get("/api/analytics/summary?days=0", headers=self.auth(user))
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["status"], "fail")

    def test_requires_auth(self) -> None:
        resp = self.client.get("/api/analytics/summary")
        self.assertEqual(resp.status_code, 401)


if __name__ == "__main__":
    unittest.main()
