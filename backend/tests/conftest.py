"""Pytest configuration and shared fixtures for API and store tests."""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test config before app imports so settings pick it up
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("GOOGLE_GEMINI_API_KEY", "")
os.environ.setdefault("RATE_LIMIT_DEFAULT", "10000/minute")

from app.core.auth import create_access_token, hash_password
from app.main import create_app
from app.models import UserInsert, UserRole
from app.storage import MemStorage


@pytest.fixture
def storage():
    """Fresh seeded in-memory store per test."""
    return MemStorage()


@pytest.fixture
def app(storage):
    return create_app(storage)


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


async def _make_user(storage, username: str, role: UserRole) -> tuple[int, dict]:
    user = await storage.create_user(
        UserInsert(username=username, password=hash_password("password123"), role=role)
    )
    token = create_access_token(user.id, user.username, user.role.value)
    return user.id, {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def test_user(storage):
    """Athlete created directly in the store: (user_id, headers)."""
    return await _make_user(storage, "athlete", UserRole.ATHLETE)


@pytest.fixture
def auth_headers(test_user):
    """Authorization header for test_user."""
    _, headers = test_user
    return headers


@pytest_asyncio.fixture
async def coach(storage):
    return await _make_user(storage, "coach", UserRole.COACH)


@pytest_asyncio.fixture
async def other_user(storage):
    return await _make_user(storage, "other", UserRole.ATHLETE)


@pytest_asyncio.fixture
async def admin(storage):
    return await _make_user(storage, "admin", UserRole.ADMIN)
