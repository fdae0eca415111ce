"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh file-backed SQLite database under tmp_path
    - get_db dependency overridden to use the test DB session
    - get_weather_lookup overridden with FakeWeather (no network)
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - File DB over :memory:: each session gets its own connection, so route
      commits and test-side reads behave like a real server database
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from taskapi.api.dependencies import get_weather_lookup
from taskapi.db.base import Base
from taskapi.infrastructure.database import get_db, DatabaseSessionManager
import taskapi.infrastructure.database as db_module
import taskapi.models  # noqa: F401
from taskapi.main import app

from tests.services.fakes import FakeWeather


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_weather():
    return FakeWeather()


@pytest.fixture
async def client(test_engine, test_session_factory, fake_weather):
    """FastAPI test client with DB and weather dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_weather_lookup] = lambda: fake_weather

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def login(client):
    """Sign up (if needed) and log in; returns Authorization headers."""
    async def _login(email: str = "alice@example.com", password: str = "s3cret-pass"):
        await client.post(
            "/api/auth/signup", json={"email": email, "password": password},
        )
        res = await client.post(
            "/api/auth/login", json={"email": email, "password": password},
        )
        assert res.status_code == 200, res.text
        return {"Authorization": f"Bearer {res.json()['token']}"}
    return _login


@pytest.fixture
async def alice(login):
    return await login("alice@example.com", "alice-pass")


@pytest.fixture
async def bob(login):
    return await login("bob@example.com", "bob-pass")
