# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from support import ApiTestCase


class TestMetrics(ApiTestCase):
    def test_upsert_keeps_unspecified_values(self) -> None:
        user = self.register("metrics@example.com")
        headers = self.auth(user)

        resp = self.client.put(
            "/api/metrics",
            json={"date": "2024-02-01", "weightRecorded": 81.2, "waterIntake": 1.5},
            headers=headers,
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        first = resp.json()["data"]
        self.assertEqual(first["sleepMinutes"], 0)

        resp = self.client.put("/api/metrics", json={"date": "2024-02-01", "sleepMinutes": 420}, headers=headers)
        second = resp.json()["data"]
        self.assertEqual(second["id"], first["id"])
        self.assertEqual(second["weightRecorded"], 81.2)
        self.assertEqual(second["waterIntake"], 1.5)
        self.assertEqual(second["sleepMinutes"], 420)

    def test_range_listing(self) -> None:
        user = self.register("metricrange@example.com")
        headers = self.auth(user)
        for day in ("2024-02-03", "2024-02-01", "2024-02-10"):
            self.client.put("/api/metrics", json={"date": day, "waterIntake": 2}, headers=headers)

        resp = self.client.get("/api/metrics?start=2024-02-01&end=2024-02-05", headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([m["date"] for m in resp.json()["data"]], ["2024-02-01", "2024-02-03"])

        resp = self.client.get("/api/metrics?start=2024-02-05&end=2024-02-01", headers=headers)
        self.assertEqual(resp.status_code, 400)

    def test_default_range_is_recent(self) -> None:
        user = self.register("metricdefault@example.com")
        headers = self.auth(user)
        self.client.put("/api/metrics", json={"waterIntake": 2.5}, headers=headers)
        self.client.put("/api/metrics", json={"date": "2000-01-01", "waterIntake": 1}, headers=headers)

        data = self.client.get("/api/metrics", headers=headers).json()["data"]
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["waterIntake"], 2.5)

    def test_validation(self) -> None:
        user = self.register("metricbad@example.com")
        resp = self.client.put("/api/metrics", json={"sleepMinutes": 5000}, headers=self.auth(user))
        self.assertEqual(resp.status_code, 400)


if __name__ == "__main__":
    unittest.main()
