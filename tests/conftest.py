"""Fixtures de test / Test fixtures."""

import os
import tempfile
from pathlib import Path

# Base SQLite temporaire, sans rate limiting / Temporary SQLite database, no rate limiting
_TEST_DB = Path(tempfile.mkdtemp()) / "worlder_test.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB}"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DEBUG"] = "false"
os.environ["SEED_SAMPLE_DATA"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

import worlder.models  # noqa: E402,F401
from worlder.database import Base, async_session, engine  # noqa: E402
from worlder.main import app  # noqa: E402
from worlder.models.country import Country  # noqa: E402


@pytest.fixture(autouse=True)
async def reset_schema():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def session():
    async with async_session() as s:
        yield s


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def make_country(name: str, iso_code: str, **overrides) -> Country:
    data = {
        "name": name,
        "iso_code": iso_code,
        "capital": f"Capital of {name}",
        "continent": "Europe",
        "population": 5_000_000,
        "area": 100_000.0,
        "currency": "Euro",
        "official_language": "English",
    }
    data.update(overrides)
    return Country(**data)
