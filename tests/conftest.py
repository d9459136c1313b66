"""
Pytest fixtures - per-test SQLite database, HTTP client, users and tokens.
"""

import os

# Settings are read once at import time; configure before importing the app
os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from reuse.core.security import create_access_token, hash_password
from reuse.db.base import Base
from reuse.db.models import User
from reuse.db.repositories.user_repository import UserRepository
from reuse.db.session import get_db
from reuse.main import app

TEST_PASSWORD = "Secret1!"


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def sync_client():
    """Plain TestClient for BDD steps that never reach the database."""
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def make_user(session: AsyncSession):
    """Factory: insert a user and return (user, auth headers)."""

    async def _make(email: str = "owner@example.com", name: str = "Owner", password: str = TEST_PASSWORD):
        user = await UserRepository(session).create(
            name=name, email=email, password_hash=hash_password(password)
        )
        token = create_access_token(user.id, user.email)
        return user, {"Authorization": f"Bearer {token}"}

    return _make


@pytest_asyncio.fixture
async def test_user(make_user) -> User:
    user, _ = await make_user()
    return user


@pytest.fixture
def auth_headers(test_user: User) -> dict:
    token = create_access_token(test_user.id, test_user.email)
    return {"Authorization": f"Bearer {token}"}
