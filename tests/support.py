# -*- coding: utf-8 -*-
"""Shared fixtures: a throwaway data root + a freshly imported app per test class."""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from typing import Dict, Optional

from fastapi.testclient import TestClient

PASSWORD = "password123"


class ApiTestCase(unittest.TestCase):
    client: TestClient

    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="nutriscan-test-"))
        data_root = cls._tmp / "data"
        os.environ["NUTRISCAN_DATA_ROOT"] = str(data_root)
        os.environ["NUTRISCAN_DB_PATH"] = str(data_root / "nutriscan.db")
        os.environ["NUTRISCAN_UPLOAD_DIR"] = str(data_root / "uploads")
        os.environ["NUTRISCAN_JWT_SECRET"] = "test-secret"
        os.environ["NUTRISCAN_DEV_ROUTES"] = "1"
        os.environ["NUTRISCAN_MAX_UPLOAD_MB"] = "1"

        # Ensure settings/app reflect the env vars above.
        for name in list(sys.modules.keys()):
            if name == "nutriscan" or name.startswith("nutriscan."):
                sys.modules.pop(name, None)

        from nutriscan.api import app  # noqa: WPS433 (import inside test for env control)

        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls) -> None:
        cls.client.close()
        shutil.rmtree(cls._tmp, ignore_errors=True)

    # helpers

    def register(self, email: str, name: str = "Test User") -> Dict[str, str]:
        resp = self.client.post("/api/auth/register", json={"email": email, "password": PASSWORD, "name": name})
        self.assertEqual(resp.status_code, 201, resp.text)
        data = resp.json()["data"]
        return {"id": data["user"]["id"], "token": data["token"]}

    @staticmethod
    def auth(user: Dict[str, str]) -> Dict[str, str]:
        return {"Authorization": f"Bearer {user['token']}"}

    def make_admin(self, user: Dict[str, str]) -> None:
        resp = self.client.post("/api/dev/toggle-role", headers=self.auth(user))
        self.assertEqual(resp.json()["data"]["role"], "admin")

    def create_food(self, user: Dict[str, str], name: str = "Rice", calories: float = 200, **extra) -> Dict:
        body = {"name": name, "calories": calories, **extra}
        resp = self.client.post("/api/foods", json=body, headers=self.auth(user))
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["data"]

    def create_profile(self, user: Dict[str, str], **overrides) -> Optional[Dict]:
        body = {
            "gender": "male",
            "dateOfBirth": "1990-01-01",
            "height": 180,
            "weight": 80,
            "mainGoal": "maintain",
            **overrides,
        }
        resp = self.client.put("/api/users/profile", json=body, headers=self.auth(user))
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["data"]
