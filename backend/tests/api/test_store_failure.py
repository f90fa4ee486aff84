"""Store Failure — verifies a failing store surfaces as a generic 500.

Invariants:
    - Runs through the real get_db / DatabaseSessionManager.session() path
    - The response carries INTERNAL_ERROR and the generic message only
    - Driver detail stays in the log, never in the body
"""

import logging
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

import app.infrastructure.database as db_module
from app.main import app
from app.services.handle_airports import AirportHandlers

URL = "/api/v1/flight/airport"


@pytest.fixture
async def live_client():
    """Client over the app's own session dependency (no get_db override)."""
    original_manager = db_module.db_manager
    app.dependency_overrides.clear()
    db_module.init_db("sqlite+aiosqlite:///:memory:")

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    await db_module.close_db()
    db_module.db_manager = original_manager


async def test_store_failure_is_a_generic_500(live_client, auth_headers, caplog):
    failing = AsyncMock(
        side_effect=OperationalError("SELECT", {}, Exception("connection refused")),
    )

    with caplog.at_level(logging.ERROR), \
            patch.object(AirportHandlers, "get_airport_by_id", failing):
        res = await live_client.get(f"{URL}/{uuid4()}", headers=auth_headers)

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["message"] == "An unexpected error occurred"
    assert "connection refused" not in res.text
    assert "DATABASE" not in res.text
    failing.assert_awaited_once()
    assert any(
        getattr(r, "debug_info", None) == {
            "operation": "execute", "detail": "Connection or operational error",
        }
        for r in caplog.records
    )


async def test_failed_command_on_real_session_is_a_generic_500(
    live_client, auth_headers,
):
    failing = AsyncMock(
        side_effect=OperationalError("INSERT", {}, Exception("disk I/O error")),
    )

    with patch.object(AirportHandlers, "create_airport", failing):
        res = await live_client.post(
            URL, json={"name": "JFK Intl", "address": "NYC", "code": "JFK"},
            headers=auth_headers,
        )

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "disk I/O" not in res.text
