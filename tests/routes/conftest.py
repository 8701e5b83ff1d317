# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import timedelta
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from app.db import transaction
from app.main import app
from app.managers.rate_limiter import limiter
from app.managers.token_manager import create_access_token
from app.models import BlogDB, UserDB
from app.repositories import BlogRepository

type BlogFactory = Callable[..., Awaitable[BlogDB]]


def bearer(user: UserDB) -> dict[str, str]:
    """Authorization header for a user."""
    token = create_access_token(
        user_id=user.id or 0,
        login=user.login,
        expires_delta=timedelta(minutes=30),
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice_headers(alice: UserDB) -> dict[str, str]:
    """Auth headers for alice."""
    return bearer(alice)


@pytest.fixture
def bob_headers(bob: UserDB) -> dict[str, str]:
    """Auth headers for bob."""
    return bearer(bob)


@pytest.fixture
def make_blog(db: None) -> BlogFactory:
    """Persist a blog directly through the repository."""

    async def factory(owner: UserDB, name: str = "Travel notes", handle: str = "travel") -> BlogDB:
        async with transaction() as session:
            return await BlogRepository(session).save(name, handle, owner.id or 0)

    return factory


@pytest.fixture
def blog_payload() -> Callable[..., dict[str, Any]]:
    """Build a JSON payload for POST/PUT."""

    def build(login: str, **fields: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": "Travel notes", "handle": "travel", "user": {"login": login}}
        payload.update(fields)
        return payload

    return build


@pytest.fixture
async def client(db: None) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    limiter.enabled = True


@pytest.fixture
def fetch_blog(db: None) -> Callable[[int], Awaitable[BlogDB | None]]:
    """Read a blog straight from the store, bypassing the API."""

    async def fetch(blog_id: int) -> BlogDB | None:
        async with transaction() as session:
            return await BlogRepository(session).get_by_id(blog_id)

    return fetch
