"""Bearer Auth — every task route rejects missing, malformed and invalid tokens.

Invariants:
    - No header, non-bearer scheme, empty token, garbage or expired token → 401
    - 401 responses carry WWW-Authenticate: Bearer
    - Auth is checked before the request body (bad body + no token → 401)
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from taskapi.config import get_settings
from taskapi.infrastructure.security import create_access_token

TASK_ROUTES = [
    ("POST", "/api/tasks"),
    ("GET", "/api/tasks"),
    ("GET", f"/api/tasks/{uuid4()}"),
    ("PUT", f"/api/tasks/{uuid4()}"),
    ("DELETE", f"/api/tasks/{uuid4()}"),
]


@pytest.mark.parametrize("method, path", TASK_ROUTES)
async def test_missing_token_401(client, method, path):
    res = await client.request(method, path, json={})
    assert res.status_code == 401
    assert res.headers["www-authenticate"] == "Bearer"
    assert res.json()["error"]["code"] == "MISSING_TOKEN"


@pytest.mark.parametrize("header", [
    "Basic dXNlcjpwYXNz",
    "Bearer",
    "Bearer ",
    "token-without-scheme",
])
async def test_malformed_header_401(client, header):
    res = await client.get("/api/tasks", headers={"Authorization": header})
    assert res.status_code == 401


async def test_garbage_token_401(client):
    res = await client.get(
        "/api/tasks", headers={"Authorization": "Bearer not.a.jwt"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_TOKEN"


async def test_token_signed_with_other_secret_401(client):
    token = create_access_token(uuid4(), "some-other-secret-that-is-long-enough")
    res = await client.get(
        "/api/tasks", headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 401


async def test_expired_token_401(client):
    settings = get_settings()
    token = create_access_token(
        uuid4(), settings.jwt_secret,
        expire_minutes=1,
        now=datetime.now(timezone.utc) - timedelta(hours=1),
    )
    res = await client.get(
        "/api/tasks", headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "TOKEN_EXPIRED"


async def test_auth_checked_before_body_validation(client):
    res = await client.post("/api/tasks", json={"title": ""})
    assert res.status_code == 401
