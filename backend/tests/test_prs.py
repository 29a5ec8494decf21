"""Tests for personal records API: log, recent with exercise name, progression, ownership."""

import pytest
from httpx import AsyncClient

from app.models import PersonalRecordInsert


async def _log_pr(client: AsyncClient, headers: dict, exercise_id: int, date: str, value: str = "100") -> dict:
    resp = await client.post(
        "/api/v1/prs",
        json={"exercise_id": exercise_id, "value": value, "unit": "kg", "date": date},
        headers=headers,
    )
    assert resp.status_code == 201
    return resp.json()


@pytest.mark.asyncio
async def test_create_pr(client: AsyncClient, test_user):
    user_id, headers = test_user
    data = await _log_pr(client, headers, 1, "2026-01-10T00:00:00Z", "140")
    assert data["user_id"] == user_id
    assert data["exercise_id"] == 1
    assert data["value"] == "140"
    assert data["notes"] is None


@pytest.mark.asyncio
async def test_create_pr_unknown_exercise(client: AsyncClient, auth_headers: dict):
    resp = await client.post(
        "/api/v1/prs",
        json={"exercise_id": 999, "value": "1", "unit": "kg", "date": "2026-01-10T00:00:00Z"},
        headers=auth_headers,
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_create_pr_requires_value(client: AsyncClient, auth_headers: dict):
    resp = await client.post(
        "/api/v1/prs",
        json={"exercise_id": 1, "value": "", "unit": "kg", "date": "2026-01-10T00:00:00Z"},
        headers=auth_headers,
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_list_and_recent_prs(client: AsyncClient, auth_headers: dict):
    await _log_pr(client, auth_headers, 1, "2026-01-01T00:00:00Z", "100")
    await _log_pr(client, auth_headers, 3, "2026-01-05T00:00:00Z", "180")
    await _log_pr(client, auth_headers, 10, "2026-01-03T00:00:00Z", "60")
    await _log_pr(client, auth_headers, 1, "2026-01-07T00:00:00Z", "110")

    resp = await client.get("/api/v1/prs", headers=auth_headers)
    assert [pr["value"] for pr in resp.json()] == ["110", "180", "60", "100"]
    assert "exercise_name" not in resp.json()[0]

    resp = await client.get("/api/v1/prs/recent", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert [(pr["value"], pr["exercise_name"]) for pr in data] == [
        ("110", "Back Squat"),
        ("180", "Deadlift"),
        ("60", "Thruster"),
    ]


@pytest.mark.asyncio
async def test_recent_prs_unknown_exercise_name(client: AsyncClient, storage, test_user):
    user_id, headers = test_user
    await storage.create_personal_record(
        PersonalRecordInsert(user_id=user_id, exercise_id=404, value="1", unit="rep", date="2026-01-01T00:00:00Z")
    )
    resp = await client.get("/api/v1/prs/recent", params={"limit": 1}, headers=headers)
    assert resp.json()[0]["exercise_name"] == "Unknown Exercise"


@pytest.mark.asyncio
async def test_progression_oldest_first(client: AsyncClient, auth_headers: dict):
    await _log_pr(client, auth_headers, 1, "2026-03-01T00:00:00Z", "120")
    await _log_pr(client, auth_headers, 1, "2026-01-01T00:00:00Z", "100")
    await _log_pr(client, auth_headers, 2, "2026-02-01T00:00:00Z", "80")

    resp = await client.get("/api/v1/prs/exercise/1", headers=auth_headers)
    assert [pr["value"] for pr in resp.json()] == ["100", "120"]

    resp = await client.get("/api/v1/prs/exercise/999", headers=auth_headers)
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_update_and_delete_own_pr(client: AsyncClient, auth_headers: dict):
    pr = await _log_pr(client, auth_headers, 1, "2026-01-01T00:00:00Z")
    url = f"/api/v1/prs/{pr['id']}"

    resp = await client.patch(url, json={"value": "105", "notes": "new belt"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["value"] == "105"
    assert resp.json()["unit"] == "kg"

    resp = await client.patch(url, json={"exercise_id": 999}, headers=auth_headers)
    assert resp.status_code == 404

    assert (await client.delete(url, headers=auth_headers)).status_code == 204
    assert (await client.get(url, headers=auth_headers)).status_code == 404


@pytest.mark.asyncio
async def test_other_users_pr_is_forbidden(client: AsyncClient, auth_headers: dict, other_user):
    pr = await _log_pr(client, auth_headers, 1, "2026-01-01T00:00:00Z")
    _, other_headers = other_user
    url = f"/api/v1/prs/{pr['id']}"
    assert (await client.get(url, headers=other_headers)).status_code == 403
    assert (await client.patch(url, json={"value": "1"}, headers=other_headers)).status_code == 403
    assert (await client.delete(url, headers=other_headers)).status_code == 403
    assert (await client.get("/api/v1/prs", headers=other_headers)).json() == []


@pytest.mark.asyncio
async def test_patch_null_clears_notes(client: AsyncClient, auth_headers: dict):
    pr = await _log_pr(client, auth_headers, 1, "2026-01-01T00:00:00Z")
    url = f"/api/v1/prs/{pr['id']}"
    await client.patch(url, json={"notes": "belt"}, headers=auth_headers)

    resp = await client.patch(url, json={"notes": None}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["notes"] is None
    assert resp.json()["value"] == "100"

    resp = await client.patch(url, json={"value": None}, headers=auth_headers)
    assert resp.status_code == 422
    assert (await client.get(url, headers=auth_headers)).json()["value"] == "100"
