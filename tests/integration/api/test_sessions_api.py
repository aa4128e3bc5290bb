from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import update
from structlog.testing import capture_logs

from building_portal.domain.base import utc_now
from building_portal.domain.entities import Session
from tests.utils.session_helpers import API, login
from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_login_creates_session(client: AsyncClient):
    response = await client.post(
        f"{API}/sessions", json={"username": "john_renter", "password": "password123"}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert len(data["sessionId"]) == 64
    assert len(data["token"]) == 64
    assert data["sessionId"] != data["token"]
    assert exclude_keys(data["user"], {"legal_sin_or_bn"}) == {
        "user_id": 1,
        "username": "john_renter",
        "email": "john@example.com",
        "full_name": "John Doe",
        "phone": "416-555-0001",
        "profile_type": "Individual",
        "role_id": 1,
        "status": "verified",
    }
    assert "X-Request-ID" in response.headers


@pytest.mark.asyncio
async def test_login_missing_fields_lists_each(client: AsyncClient):
    response = await client.post(f"{API}/sessions", json={})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert sorted(issue["path"] for issue in error["details"]) == ["password", "username"]


@pytest.mark.asyncio
async def test_login_bad_password_is_logged_without_password(client: AsyncClient):
    with capture_logs() as logs:
        response = await client.post(
            f"{API}/sessions", json={"username": "john_renter", "password": "wrongpass1"}
        )

    assert response.status_code == 401
    assert response.json()["error"] == {"code": "AUTH_ERROR", "message": "Invalid credentials"}

    security = [entry for entry in logs if entry["event"] == "Security: Failed login attempt"]
    assert len(security) == 1
    assert security[0]["context"]["username"] == "john_renter"
    assert security[0]["metadata"] == {"reason": "INVALID_PASSWORD"}
    assert "wrongpass1" not in repr(logs)


@pytest.mark.asyncio
async def test_unknown_user_gets_same_message(client: AsyncClient):
    response = await client.post(
        f"{API}/sessions", json={"username": "ghost_user", "password": "password123"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid credentials"


@pytest.mark.asyncio
async def test_current_session_returns_snapshot(client: AsyncClient):
    headers = await login(client, "mr_owner", "owner789")

    response = await client.get(f"{API}/sessions/current", headers=headers)

    assert response.status_code == 200
    session = response.json()["session"]
    assert session["username"] == "mr_owner"
    assert session["role_name"] == "OWNER"
    assert session["properties"] == [1, 2, 3]
    assert "token" not in session


@pytest.mark.asyncio
async def test_session_cookies_are_accepted(client: AsyncClient):
    headers = await login(client, "john_renter", "password123")

    client.cookies.set("dingdong_session_id", headers["session-id"])
    client.cookies.set("dingdong_session_token", headers["session-token"])

    response = await client.get(f"{API}/sessions/current")

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_both_secrets_are_required(client: AsyncClient):
    first = await login(client, "john_renter", "password123")
    second = await login(client, "alice_lease", "leasepass456")

    swapped = {"session-id": first["session-id"], "session-token": second["session-token"]}
    response = await client.get(f"{API}/sessions/current", headers=swapped)
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_SESSION"

    only_id = {"session-id": first["session-id"]}
    response = await client.get(f"{API}/sessions/current", headers=only_id)
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "NO_SESSION"


@pytest.mark.asyncio
async def test_expired_session_is_rejected(client: AsyncClient, session_factory):
    headers = await login(client, "john_renter", "password123")

    async with session_factory() as db:
        await db.execute(
            update(Session)
            .where(Session.session_id == headers["session-id"])
            .values(expires_at=utc_now() - timedelta(seconds=1))
        )
        await db.commit()

    response = await client.get(f"{API}/sessions/current", headers=headers)
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "SESSION_EXPIRED"

    # stale sessions can still be logged out
    response = await client.delete(f"{API}/sessions/current", headers=headers)
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_concurrent_sessions_for_same_user(client: AsyncClient):
    first = await login(client, "john_renter", "password123")
    second = await login(client, "john_renter", "password123")

    assert first["session-id"] != second["session-id"]
    for headers in (first, second):
        response = await client.get(f"{API}/sessions/current", headers=headers)
        assert response.status_code == 200


@pytest.mark.asyncio
async def test_logout_with_wrong_token_keeps_session(client: AsyncClient):
    headers = await login(client, "john_renter", "password123")
    wrong = {"session-id": headers["session-id"], "session-token": "f" * 64}

    response = await client.delete(f"{API}/sessions/current", headers=wrong)
    assert response.status_code == 401

    response = await client.get(f"{API}/sessions/current", headers=headers)
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_logout_deletes_session(client: AsyncClient):
    headers = await login(client, "john_renter", "password123")

    with capture_logs() as logs:
        response = await client.delete(f"{API}/sessions/current", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Logged out successfully"}
    assert any(entry["event"] == "Audit: LOGOUT on user/1" for entry in logs)

    response = await client.get(f"{API}/sessions/current", headers=headers)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_is_rate_limited(client: AsyncClient):
    payload = {"username": "john_renter", "password": "wrongpass1"}
    for _ in range(10):
        response = await client.post(f"{API}/sessions", json=payload)
        assert response.status_code == 401

    response = await client.post(f"{API}/sessions", json=payload)
    assert response.status_code == 429
    assert response.json()["error"]["code"] == "RATE_LIMIT"
