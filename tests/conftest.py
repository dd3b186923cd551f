"""Shared fixtures: isolated settings, a throwaway SQLite database, and an HTTP client."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from scripthub.core.config import get_settings
from scripthub.core.security import create_access_token
from scripthub.db import models  # noqa: F401
from scripthub.infrastructure.database.base import Base
from scripthub.main import create_app
from scripthub.modules.access import RoleService
from scripthub.modules.scripts import ScriptInput

TEST_SECRET = "test-secret-key-for-scripthub"
ADMIN = "admin-principal-aaaa"
ALICE = "alice-principal-bbbb"
BOB = "bob-principal-cccc"


@pytest.fixture(autouse=True)
def test_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("DATABASE__URL", f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    monkeypatch.setenv("SECURITY__SECRET_KEY", TEST_SECRET)
    monkeypatch.setenv("SECURITY__BOOTSTRAP_ADMINS", f'["{ADMIN}"]')
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'core.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def admin(session):
    await RoleService.with_session(session).seed_admins([ADMIN])
    return ADMIN


@pytest.fixture
def client(test_settings):
    with TestClient(create_app()) as client:
        yield client


def auth(identity: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(identity)}"}


def script_input(title: str = "fmt.py", category: str = "Python", **overrides) -> ScriptInput:
    fields = {
        "title": title,
        "description": "formats things",
        "category": category,
        "content": "print('hello')",
    }
    fields.update(overrides)
    return ScriptInput(**fields)


def script_payload(title: str = "fmt.py", category: str = "Python", **overrides) -> dict:
    return {
        "title": title,
        "description": "formats things",
        "category": category,
        "content": "print('hello')",
        **overrides,
    }
