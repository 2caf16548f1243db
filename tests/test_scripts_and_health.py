"""Tests for the create_user CLI and the health endpoint."""

import unittest
from unittest.mock import patch

from playlist_api.core.config import settings
from playlist_api.models import User
from playlist_api.scripts import create_user
from support import API, PASSWORD, ApiTestCase, make_session_factory


class TestCreateUserScript(unittest.TestCase):
    def setUp(self) -> None:
        self.SessionLocal = make_session_factory()
        patcher = patch.object(create_user, "SessionLocal", self.SessionLocal)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_creates_admin(self) -> None:
        code = create_user.main(["root@example.com", PASSWORD, "Root", "--role", "admin"])
        self.assertEqual(code, 0)
        db = self.SessionLocal()
        try:
            user = db.query(User).filter(User.email == "root@example.com").one()
            self.assertEqual(user.role, "admin")
            self.assertIsNotNone(user.credentials)
        finally:
            db.close()

    def test_duplicate_email_fails(self) -> None:
        self.assertEqual(create_user.main(["a@example.com", PASSWORD, "A"]), 0)
        self.assertEqual(create_user.main(["a@example.com", PASSWORD, "A"]), 1)

    def test_short_password_fails(self) -> None:
        self.assertEqual(create_user.main(["a@example.com", "short", "A"]), 1)


class TestHealth(ApiTestCase):
    def test_reports_database_connected(self) -> None:
        response = self.client.get(f"{API}/health/")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["database"], "connected")
        self.assertEqual(body["environment"], settings.APP_ENV)

    def test_degraded_when_database_unreachable(self) -> None:
        with patch("playlist_api.api.v1.health.check_db_connected", return_value=False):
            body = self.client.get(f"{API}/health/").json()
        self.assertEqual(body["status"], "degraded")
        self.assertEqual(body["database"], "disconnected")

    def test_root_path_is_not_served(self) -> None:
        self.assertEqual(self.client.get("/").status_code, 404)


if __name__ == "__main__":
    unittest.main()
