# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from support import PASSWORD, ApiTestCase


class TestAuth(ApiTestCase):
    def test_register_returns_token(self) -> None:
        resp = self.client.post(
            "/api/auth/register",
            json={"email": "New.User@Example.com", "password": PASSWORD, "name": "New User"},
        )
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["status"], "success")
        self.assertEqual(body["data"]["user"]["email"], "new.user@example.com")
        self.assertTrue(body["data"]["token"])

    def test_duplicate_email_rejected(self) -> None:
        self.register("dup@example.com")
        resp = self.client.post(
            "/api/auth/register",
            json={"email": "DUP@example.com", "password": PASSWORD, "name": "Again"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"status": "fail", "message": "Email already in use"})

    def test_register_validation(self) -> None:
        resp = self.client.post("/api/auth/register", json={"email": "not-an-email", "password": "x", "name": "A"})
        self.assertEqual(resp.status_code, 400)
        body = resp.json()
        self.assertEqual(body["status"], "fail")
        fields = {issue["loc"][-1] for issue in body["errors"]}
        self.assertTrue({"email", "password", "name"} <= fields)

    def test_login(self) -> None:
        self.register("login@example.com", name="Login User")
        resp = self.client.post("/api/auth/login", json={"email": "login@example.com", "password": PASSWORD})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()["data"]
        self.assertEqual(data["user"]["name"], "Login User")
        self.assertEqual(data["user"]["role"], "user")
        self.assertIsNone(data["user"]["profile"])
        self.assertNotIn("passwordHash", data["user"])

        token = data["token"]
        resp = self.client.get("/api/logs/recent", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 200)

    def test_login_failures_share_message(self) -> None:
        self.register("wrongpw@example.com")
        wrong_pw = self.client.post("/api/auth/login", json={"email": "wrongpw@example.com", "password": "nope-nope"})
        no_user = self.client.post("/api/auth/login", json={"email": "ghost@example.com", "password": PASSWORD})
        self.assertEqual(wrong_pw.status_code, 401)
        self.assertEqual(no_user.status_code, 401)
        self.assertEqual(wrong_pw.json(), no_user.json())
        self.assertEqual(wrong_pw.json()["message"], "Incorrect email or password")

    def test_check_email(self) -> None:
        self.register("taken@example.com")
        resp = self.client.post("/api/auth/check-email", json={"email": "taken@example.com"})
        self.assertEqual(resp.json()["data"], {"available": False})
        resp = self.client.post("/api/auth/check-email", json={"email": "free@example.com"})
        self.assertEqual(resp.json()["data"], {"available": True})

        resp = self.client.post("/api/auth/check-email", json={})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Email is required")

    def test_protected_routes_require_token(self) -> None:
        resp = self.client.get("/api/users/profile")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["status"], "fail")

        resp = self.client.get("/api/users/profile", headers={"Authorization": "Bearer not.a.token"})
        self.assertEqual(resp.status_code, 401)

    def _token(self, user_id: str, *, exp_offset: int = 3600, secret: str | None = None) -> str:
        import time

        from nutriscan.auth.security import _jwt_encode
        from nutriscan.config import settings

        now = int(time.time())
        payload = {"sub": user_id, "iat": now, "exp": now + exp_offset}
        return _jwt_encode(payload, secret or settings.jwt_secret)

    def _assert_rejected(self, token: str) -> None:
        resp = self.client.get("/api/logs/recent", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"status": "fail", "message": "Not authorized to access this route"})

    def test_expired_token_rejected(self) -> None:
        user = self.register("expired@example.com")
        valid = self._token(user["id"])
        resp = self.client.get("/api/logs/recent", headers={"Authorization": f"Bearer {valid}"})
        self.assertEqual(resp.status_code, 200)

        self._assert_rejected(self._token(user["id"], exp_offset=-60))

    def test_bad_signature_rejected(self) -> None:
        user = self.register("forged@example.com")
        self._assert_rejected(self._token(user["id"], secret="some-other-secret"))

    def test_token_for_deleted_user_rejected(self) -> None:
        user = self.register("orphan@example.com")
        resp = self.client.delete("/api/users/profile", headers=self.auth(user))
        self.assertEqual(resp.status_code, 200)
        self._assert_rejected(user["token"])

    def test_misc_routes(self) -> None:
        self.assertEqual(self.client.get("/").json(), {"message": "Welcome to NutriScan API"})
        self.assertEqual(self.client.get("/api").json()["message"], "NutriScan API is running")
        self.assertEqual(self.client.get("/api/health").json(), {"ok": True})

    def test_unknown_route_uses_envelope(self) -> None:
        resp = self.client.get("/api/nope")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["status"], "fail")


if __name__ == "__main__":
    unittest.main()
