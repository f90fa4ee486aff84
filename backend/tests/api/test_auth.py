"""Authentication — every business route rejects unauthenticated callers with 401.

Invariants:
    - No header, wrong scheme, unknown token → 401 UNAUTHENTICATED
    - Rejected calls never reach the store
    - Health probes stay public
"""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from app.infrastructure.security import caller_for_token
from app.models.airport import Airport

ROUTES = [
    ("post", "/api/v1/flight/airport"),
    ("get", f"/api/v1/flight/airport/{uuid4()}"),
    ("delete", f"/api/v1/flight/airport/{uuid4()}"),
    ("get", f"/api/v1/passenger/{uuid4()}"),
]


@pytest.mark.parametrize("method, url", ROUTES)
async def test_missing_token_is_401(client, method, url):
    kwargs = {"json": {"name": "A", "address": "B", "code": "C"}} if method == "post" else {}
    res = await client.request(method.upper(), url, **kwargs)
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHENTICATED"
    assert res.headers["www-authenticate"] == "Bearer"


async def test_unknown_token_is_401_and_nothing_is_written(client, test_db):
    res = await client.post(
        "/api/v1/flight/airport",
        json={"name": "JFK Intl", "address": "NYC", "code": "JFK"},
        headers={"Authorization": "Bearer wrong-token"},
    )

    assert res.status_code == 401
    count = (await test_db.execute(select(func.count()).select_from(Airport))).scalar_one()
    assert count == 0


async def test_basic_scheme_is_rejected(client):
    res = await client.get(
        f"/api/v1/passenger/{uuid4()}",
        headers={"Authorization": "Basic dGVzdDp0ZXN0"},
    )
    assert res.status_code == 401


def test_caller_for_token_is_stable_and_opaque():
    a = caller_for_token("test-token", ["other", "test-token"])
    b = caller_for_token("test-token", ["test-token"])
    assert a == b
    assert "test-token" not in a.subject


def test_caller_for_token_rejects_unknown():
    assert caller_for_token("nope", ["test-token"]) is None
    assert caller_for_token("nope", []) is None
