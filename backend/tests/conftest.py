"""Pytest configuration for tests directory."""
import os

# Settings are read at import time, so the environment must be ready first.
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-0123456789")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SEED_DEMO_DATA", "false")

import pytest
from httpx import ASGITransport, AsyncClient

from closet.domain.admin.services import UserService
from closet.infra.db.session import Database
from closet.main import create_app


@pytest.fixture
def db() -> Database:
    """A fresh, empty store."""
    return Database()


@pytest.fixture
def user_service(db: Database) -> UserService:
    return UserService(db, starting_balance=100)


@pytest.fixture
def app(db: Database):
    return create_app(db)


@pytest.fixture
async def client(app):
    """HTTP client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def signup(client: AsyncClient):
    """Register a user over the API. Returns ``(user_json, auth_headers)``."""

    async def _signup(username: str, password: str = "secret123", email: str | None = None):
        response = await client.post(
            "/api/auth/register",
            json={
                "username": username,
                "email": email or f"{username}@example.com",
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        data = response.json()
        return data["user"], {"Authorization": f"Bearer {data['token']}"}

    return _signup


@pytest.fixture
def create_dress(client: AsyncClient):
    """List a dress over the API as the given user. Returns the dress json."""

    async def _create(headers: dict, **fields):
        body = {"brand": "Ganni", "title": "Wrap Dress", "buttonsPrice": 50}
        body.update(fields)
        response = await client.post("/api/dresses", json=body, headers=headers)
        assert response.status_code == 200, response.text
        return response.json()["dress"]

    return _create
