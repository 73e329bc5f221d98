from __future__ import annotations

import json
from pathlib import Path

import pytest

from disaster_console.session import INVALID_CREDENTIALS_MESSAGE, SessionStore, TokenStorage

LOGIN = "/api/admin/login"


@pytest.mark.asyncio
async def test_login_success_persists_token_and_profile(backend, session: SessionStore, isolated_env: Path) -> None:
    backend.add(
        "POST",
        LOGIN,
        json={
            "success": True,
            "token": "jwt-123",
            "admin": {"id": "a-1", "name": "Control Room", "email": "ops@example.org"},
        },
    )

    result = await session.login("ops@example.org", "pw")

    assert result.success is True
    assert result.message is None
    assert session.is_authenticated
    assert session.token == "jwt-123"
    assert session.admin is not None and session.admin.name == "Control Room"
    stored = json.loads(isolated_env.read_text(encoding="utf-8"))
    assert stored["adminToken"] == "jwt-123"
    assert stored["admin"]["email"] == "ops@example.org"


@pytest.mark.asyncio
async def test_login_without_admin_profile_uses_default(backend, session: SessionStore) -> None:
    backend.add("POST", LOGIN, json={"success": True, "token": "jwt-123"})

    result = await session.login("ops@example.org", "pw")

    assert result.success
    assert session.admin is not None
    assert (session.admin.id, session.admin.name, session.admin.email) == (
        "admin-id",
        "Admin User",
        "ops@example.org",
    )


@pytest.mark.asyncio
async def test_token_is_attached_after_login(backend, api_client, session: SessionStore) -> None:
    backend.add("POST", LOGIN, json={"success": True, "token": "jwt-xyz"})
    backend.add("GET", "/api/disasters", json=[])

    await session.login("ops@example.org", "pw")
    await api_client.list_disasters()

    assert backend.calls("GET", "/api/disasters")[0].headers["authorization"] == "Bearer jwt-xyz"


@pytest.mark.asyncio
async def test_login_unauthorized(backend, session: SessionStore, isolated_env: Path) -> None:
    backend.add("POST", LOGIN, status=401, json={"message": "Invalid credentials"})

    result = await session.login("ops@example.org", "wrong")

    assert result.success is False
    assert result.message == INVALID_CREDENTIALS_MESSAGE
    assert not session.is_authenticated
    assert not isolated_env.exists()


@pytest.mark.asyncio
async def test_login_server_error_reports_status(backend, session: SessionStore, isolated_env: Path) -> None:
    backend.add("POST", LOGIN, status=500, text="oops")

    result = await session.login("ops@example.org", "pw")

    assert result.success is False
    assert result.message == "Server error (500): Internal Server Error"
    assert not isolated_env.exists()


@pytest.mark.asyncio
async def test_login_network_failure(backend, session: SessionStore, isolated_env: Path) -> None:
    backend.add("POST", LOGIN, error="connection refused")

    result = await session.login("ops@example.org", "pw")

    assert result.success is False
    assert result.message == (
        "Unable to connect to server. Please check if the backend is running on http://backend.test"
    )
    assert not isolated_env.exists()


@pytest.mark.asyncio
async def test_login_response_without_token(backend, session: SessionStore, isolated_env: Path) -> None:
    backend.add("POST", LOGIN, json={"success": False, "message": "Account locked"})

    result = await session.login("ops@example.org", "pw")

    assert result.success is False
    assert result.message == "Account locked"
    assert session.token is None
    assert not isolated_env.exists()


@pytest.mark.asyncio
async def test_failed_login_keeps_previous_session(backend, logged_in_session: SessionStore) -> None:
    backend.add("POST", LOGIN, status=401, json={})

    result = await logged_in_session.login("ops@example.org", "wrong")

    assert result.success is False
    assert logged_in_session.token == "stored-token"


def test_restore_and_logout(session: SessionStore, token_storage: TokenStorage, isolated_env: Path) -> None:
    assert session.restore() is False

    token_storage.save("persisted")
    assert session.restore() is True
    assert session.token == "persisted"
    assert session.admin is None

    session.logout()

    assert session.token is None
    assert not session.is_authenticated
    assert not isolated_env.exists()
    # 重复登出不报错
    session.logout()
