# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before the app (and its engine) is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_TO_FILE"] = "false"
os.environ["ENABLE_TRANSLATION"] = "true"
os.environ["CLIENT_APP_NAME"] = "blogApp"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from app.db import close_db, drop_db, init_db, transaction  # noqa: E402
from app.models import UserDB  # noqa: E402
from app.repositories import UserRepository  # noqa: E402
from app.schemas import UserCreate  # noqa: E402


@pytest.fixture
async def db() -> AsyncGenerator[None]:
    """Create every table before the test and drop them afterwards."""
    await init_db()
    yield
    await drop_db()
    # Releases the shared in-memory connection bound to this test's loop
    await close_db()


@pytest.fixture
async def session(db: None) -> AsyncGenerator[AsyncSession]:
    """Session inside a transaction committed when the test finishes."""
    async with transaction() as session:
        yield session


async def create_user(login: str) -> UserDB:
    """Persist a user in its own committed transaction."""
    async with transaction() as session:
        return await UserRepository(session).create(
            UserCreate(login=login, email=f"{login}@example.com"),
        )


@pytest.fixture
async def alice(db: None) -> UserDB:
    """Registered user 'alice'."""
    return await create_user("alice")


@pytest.fixture
async def bob(db: None) -> UserDB:
    """Registered user 'bob'."""
    return await create_user("bob")
