"""Shared test helpers: in-memory SQLite session factory and an API test base class."""

import unittest
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from playlist_api.api.dependencies import get_password_hasher
from playlist_api.core.database import get_db
from playlist_api.core.security import ROLE_ADMIN, PasswordHasher
from playlist_api.main import app
from playlist_api.models import Base
from playlist_api.schemas.user import Name, UserCreate
from playlist_api.services.user_service import UserAuthService

API = "/api/v1"
PASSWORD = "correct-horse-battery"

# Lowest bcrypt cost keeps the suite fast.
FAST_HASHER = PasswordHasher(rounds=4)


def make_session_factory() -> sessionmaker:
    """Fresh in-memory SQLite database with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def user_create(email: str = "ada@example.com", **kwargs: Any) -> UserCreate:
    defaults: dict[str, Any] = {
        "name": Name(first="Ada", last="Lovelace"),
        "age": 36,
    }
    defaults.update(kwargs)
    return UserCreate(email=email, **defaults)


def sign_up_body(email: str, password: str = PASSWORD, **user_fields: Any) -> dict[str, Any]:
    user = {"name": {"first": "Ada", "last": "Lovelace"}, "age": 36, "email": email}
    user.update(user_fields)
    return {"user": user, "user_credentials": {"password": password}}


class ApiTestCase(unittest.TestCase):
    """TestClient against the real app with get_db bound to a per-test SQLite database."""

    def setUp(self) -> None:
        self.SessionLocal = make_session_factory()

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_password_hasher] = lambda: FAST_HASHER
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def db(self) -> Session:
        return self.SessionLocal()

    def sign_up(self, email: str, password: str = PASSWORD) -> dict[str, Any]:
        response = self.client.post(f"{API}/users/sign-up", json=sign_up_body(email, password))
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()

    def create_admin(self, email: str = "admin@example.com") -> int:
        """Admins cannot self-register over HTTP; create one through the service."""
        db = self.db()
        try:
            user = UserAuthService(db, FAST_HASHER).sign_up(
                user_create(email), PASSWORD, role=ROLE_ADMIN
            )
            return user.id
        finally:
            db.close()

    def login(self, email: str, password: str = PASSWORD) -> str:
        response = self.client.post(
            f"{API}/users/login", json={"email": email, "password": password}
        )
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()["token"]

    @staticmethod
    def auth(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
