"""Tests for workouts API: create, list, filter by type, recent, ownership."""

import pytest
from httpx import AsyncClient


async def _log(client: AsyncClient, headers: dict, date: str, type_: str = "AMRAP", **extra) -> dict:
    resp = await client.post(
        "/api/v1/workouts",
        json={"date": date, "type": type_, "description": "Cindy", **extra},
        headers=headers,
    )
    assert resp.status_code == 201
    return resp.json()


@pytest.mark.asyncio
async def test_create_workout(client: AsyncClient, test_user):
    user_id, headers = test_user
    data = await _log(client, headers, "2026-02-25T12:00:00Z", "For Time", result="12:30")
    assert data["user_id"] == user_id
    assert data["type"] == "For Time"
    assert data["result"] == "12:30"
    assert data["completed"] is False
    assert data["id"] == 1


@pytest.mark.asyncio
async def test_create_workout_rejects_unknown_type(client: AsyncClient, auth_headers: dict):
    resp = await client.post(
        "/api/v1/workouts",
        json={"date": "2026-02-25T12:00:00Z", "type": "Yoga", "description": "x"},
        headers=auth_headers,
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_create_workout_unauthorized(client: AsyncClient):
    resp = await client.post(
        "/api/v1/workouts",
        json={"date": "2026-02-25T12:00:00Z", "type": "AMRAP", "description": "x"},
    )
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_list_workouts_newest_first_and_by_type(client: AsyncClient, auth_headers: dict):
    await _log(client, auth_headers, "2026-02-01T10:00:00Z", "AMRAP")
    await _log(client, auth_headers, "2026-02-03T10:00:00Z", "EMOM")
    await _log(client, auth_headers, "2026-02-02T10:00:00Z", "AMRAP")

    resp = await client.get("/api/v1/workouts", headers=auth_headers)
    assert resp.status_code == 200
    dates = [w["date"][:10] for w in resp.json()]
    assert dates == ["2026-02-03", "2026-02-02", "2026-02-01"]

    resp = await client.get("/api/v1/workouts", params={"type": "AMRAP"}, headers=auth_headers)
    assert [w["date"][:10] for w in resp.json()] == ["2026-02-02", "2026-02-01"]


@pytest.mark.asyncio
async def test_recent_workouts_limit(client: AsyncClient, auth_headers: dict):
    for day in range(1, 8):
        await _log(client, auth_headers, f"2026-02-0{day}T10:00:00Z")
    resp = await client.get("/api/v1/workouts/recent", headers=auth_headers)
    assert len(resp.json()) == 5
    assert resp.json()[0]["date"][:10] == "2026-02-07"

    resp = await client.get("/api/v1/workouts/recent", params={"limit": 2}, headers=auth_headers)
    assert [w["date"][:10] for w in resp.json()] == ["2026-02-07", "2026-02-06"]


@pytest.mark.asyncio
async def test_list_is_scoped_to_caller(client: AsyncClient, auth_headers: dict, other_user):
    await _log(client, auth_headers, "2026-02-01T10:00:00Z")
    _, other_headers = other_user
    resp = await client.get("/api/v1/workouts", headers=other_headers)
    assert resp.json() == []


@pytest.mark.asyncio
async def test_update_workout(client: AsyncClient, auth_headers: dict):
    created = await _log(client, auth_headers, "2026-02-01T10:00:00Z")
    resp = await client.patch(
        f"/api/v1/workouts/{created['id']}",
        json={"result": "15 rounds", "completed": True},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["result"] == "15 rounds"
    assert data["completed"] is True
    assert data["description"] == "Cindy"


@pytest.mark.asyncio
async def test_other_users_workout_is_forbidden(client: AsyncClient, auth_headers: dict, other_user):
    created = await _log(client, auth_headers, "2026-02-01T10:00:00Z")
    _, other_headers = other_user
    url = f"/api/v1/workouts/{created['id']}"
    assert (await client.get(url, headers=other_headers)).status_code == 403
    assert (await client.patch(url, json={"result": "x"}, headers=other_headers)).status_code == 403
    assert (await client.delete(url, headers=other_headers)).status_code == 403
    assert (await client.get(url, headers=auth_headers)).json()["result"] is None


@pytest.mark.asyncio
async def test_delete_workout(client: AsyncClient, auth_headers: dict):
    created = await _log(client, auth_headers, "2026-02-01T10:00:00Z")
    url = f"/api/v1/workouts/{created['id']}"
    resp = await client.delete(url, headers=auth_headers)
    assert resp.status_code == 204
    assert (await client.get(url, headers=auth_headers)).status_code == 404
    assert (await client.delete(url, headers=auth_headers)).status_code == 404


@pytest.mark.asyncio
async def test_missing_workout_404(client: AsyncClient, auth_headers: dict):
    resp = await client.patch("/api/v1/workouts/999", json={"result": "x"}, headers=auth_headers)
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_patch_null_clears_result_but_not_description(client: AsyncClient, auth_headers: dict):
    created = await _log(client, auth_headers, "2026-02-01T10:00:00Z", result="15 rounds")
    url = f"/api/v1/workouts/{created['id']}"

    resp = await client.patch(url, json={"result": None}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["result"] is None

    resp = await client.patch(url, json={"description": None}, headers=auth_headers)
    assert resp.status_code == 422
    assert (await client.get(url, headers=auth_headers)).json()["description"] == "Cindy"
