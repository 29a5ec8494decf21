"""Tests for auth endpoints: register, login, me, session."""

from unittest.mock import patch

import pytest
from httpx import AsyncClient

from app.config import settings
from app.core.auth import hash_password, verify_password
from app.main import run


@pytest.mark.asyncio
async def test_register(client: AsyncClient):
    resp = await client.post(
        "/api/v1/auth/register",
        json={"username": "newuser", "password": "securepass123", "email": " New@Test.com "},
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["username"] == "newuser"
    assert data["email"] == "new@test.com"
    assert data["role"] == "athlete"
    assert "password" not in data


@pytest.mark.asyncio
async def test_register_stores_hash_not_plain_password(client: AsyncClient, storage):
    await client.post("/api/v1/auth/register", json={"username": "hashme", "password": "plain-pass"})
    user = await storage.get_user_by_username("hashme")
    assert user.password != "plain-pass"
    assert verify_password("plain-pass", user.password)


@pytest.mark.asyncio
async def test_register_duplicate_username(client: AsyncClient, storage):
    """Second register with the same username returns 400. First user goes straight to the store."""
    from app.models import UserInsert

    await storage.create_user(UserInsert(username="dup", password=hash_password("x")))
    resp = await client.post(
        "/api/v1/auth/register",
        json={"username": "dup", "password": "other"},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Username already exists"


@pytest.mark.asyncio
async def test_register_requires_username_and_password(client: AsyncClient):
    resp = await client.post("/api/v1/auth/register", json={"username": "   ", "password": "x"})
    assert resp.status_code == 400
    resp = await client.post("/api/v1/auth/register", json={"username": "u", "password": ""})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_login(client: AsyncClient, auth_headers: dict):
    resp = await client.post(
        "/api/v1/auth/login",
        json={"username": "athlete", "password": "password123"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["user"]["username"] == "athlete"
    assert data["token_type"] == "bearer"
    assert data["expires_in"] > 0
    assert "access_token" in data

    me = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {data['access_token']}"})
    assert me.status_code == 200
    assert me.json()["username"] == "athlete"


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, auth_headers: dict):
    resp = await client.post(
        "/api/v1/auth/login",
        json={"username": "athlete", "password": "wrong"},
    )
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_login_unknown_user(client: AsyncClient):
    resp = await client.post(
        "/api/v1/auth/login",
        json={"username": "nobody", "password": "password123"},
    )
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_me(client: AsyncClient, auth_headers: dict):
    resp = await client.get("/api/v1/auth/me", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["username"] == "athlete"
    assert "password" not in data


@pytest.mark.asyncio
async def test_me_unauthorized(client: AsyncClient):
    resp = await client.get("/api/v1/auth/me")
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_me_invalid_token(client: AsyncClient):
    resp = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_session(client: AsyncClient, test_user):
    user_id, headers = test_user
    resp = await client.get("/api/v1/auth/session", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"is_authenticated": True, "user_id": user_id}

    resp = await client.get("/api/v1/auth/session")
    assert resp.json() == {"is_authenticated": False, "user_id": None}


@pytest.mark.asyncio
async def test_list_users_requires_coach(client: AsyncClient, auth_headers: dict, coach):
    resp = await client.get("/api/v1/users", headers=auth_headers)
    assert resp.status_code == 403

    _, coach_headers = coach
    resp = await client.get("/api/v1/users", headers=coach_headers)
    assert resp.status_code == 200
    usernames = {u["username"] for u in resp.json()}
    assert usernames == {"athlete", "coach"}
    assert all("password" not in u for u in resp.json())


@pytest.mark.asyncio
async def test_health_and_security_headers(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_run_serves_app_with_uvicorn():
    with patch("uvicorn.run") as uvicorn_run, patch.object(settings, "port", 9000):
        run()
    uvicorn_run.assert_called_once_with("app.main:app", host=settings.host, port=9000, reload=settings.debug)
