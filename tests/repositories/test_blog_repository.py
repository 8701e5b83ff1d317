# tests/repositories/test_blog_repository.py
"""Tests for BlogRepository and UserRepository against SQLite."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import DuplicateEntryError, RecordNotFoundError
from app.models import UserDB
from app.repositories import BlogRepository, UserRepository
from app.schemas import UserCreate


class TestBlogRepository:
    """Tests for blog persistence."""

    @pytest.mark.asyncio
    async def test_save_assigns_id(self, session: AsyncSession, alice: UserDB) -> None:
        repo = BlogRepository(session)

        blog = await repo.save("Travel notes", "travel", alice.id or 0)

        assert blog.id is not None
        assert blog.user_id == alice.id
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_get_by_id_loads_owner(self, session: AsyncSession, alice: UserDB) -> None:
        repo = BlogRepository(session)
        blog = await repo.save("Travel notes", "travel", alice.id or 0)
        session.expunge_all()

        loaded = await repo.get_by_id(blog.id or 0)

        assert loaded is not None
        assert loaded.user is not None
        assert loaded.user.login == "alice"

    @pytest.mark.asyncio
    async def test_get_or_raise_missing(self, session: AsyncSession) -> None:
        with pytest.raises(RecordNotFoundError) as exc_info:
            await BlogRepository(session).get_or_raise(99)

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Blog with ID 99 not found"

    @pytest.mark.asyncio
    async def test_find_by_owner_login(
        self,
        session: AsyncSession,
        alice: UserDB,
        bob: UserDB,
    ) -> None:
        repo = BlogRepository(session)
        first = await repo.save("First", "one", alice.id or 0)
        await repo.save("Other", "ot", bob.id or 0)
        second = await repo.save("Second", "two", alice.id or 0)

        blogs = await repo.find_by_owner_login("alice")

        assert [blog.id for blog in blogs] == [first.id, second.id]
        assert await repo.find_by_owner_login("nobody") == []

    @pytest.mark.asyncio
    async def test_find_by_owner_login_binds_value(
        self,
        session: AsyncSession,
        alice: UserDB,
    ) -> None:
        repo = BlogRepository(session)
        await repo.save("First", "one", alice.id or 0)

        assert await repo.find_by_owner_login("' OR '1'='1") == []

    @pytest.mark.asyncio
    async def test_update_field_touches_one_row(
        self,
        session: AsyncSession,
        alice: UserDB,
    ) -> None:
        repo = BlogRepository(session)
        target = await repo.save("Target", "tg", alice.id or 0)
        other = await repo.save("Other", "ot", alice.id or 0)

        rows = await repo.update_field(target.id or 0, "name", "x'; DROP TABLE blogs; --")
        session.expunge_all()

        assert rows == 1
        reloaded_target = await repo.get_or_raise(target.id or 0)
        reloaded_other = await repo.get_or_raise(other.id or 0)
        assert reloaded_target.name == "x'; DROP TABLE blogs; --"
        assert reloaded_other.name == "Other"

    @pytest.mark.asyncio
    async def test_update_field_reassigns_owner(
        self,
        session: AsyncSession,
        alice: UserDB,
        bob: UserDB,
    ) -> None:
        repo = BlogRepository(session)
        blog = await repo.save("Target", "tg", alice.id or 0)

        await repo.update_field(blog.id or 0, "user_id", bob.id or 0)

        assert [b.id for b in await repo.find_by_owner_login("bob")] == [blog.id]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["id", "name; --", "user"])
    async def test_update_field_rejects_other_columns(
        self,
        session: AsyncSession,
        field: str,
    ) -> None:
        with pytest.raises(ValueError, match="cannot be updated"):
            await BlogRepository(session).update_field(1, field, "value")

    @pytest.mark.asyncio
    async def test_update_field_missing_row(self, session: AsyncSession) -> None:
        assert await BlogRepository(session).update_field(99, "name", "Nothing") == 0

    @pytest.mark.asyncio
    async def test_delete_by_id(self, session: AsyncSession, alice: UserDB) -> None:
        repo = BlogRepository(session)
        blog = await repo.save("Target", "tg", alice.id or 0)

        assert await repo.delete_by_id(blog.id or 0) == 1
        assert await repo.delete_by_id(blog.id or 0) == 0
        assert not await repo.exists(blog.id or 0)


class TestUserRepository:
    """Tests for owner accounts."""

    @pytest.mark.asyncio
    async def test_get_by_login(self, session: AsyncSession, alice: UserDB) -> None:
        repo = UserRepository(session)

        found = await repo.get_by_login("alice")

        assert found is not None
        assert found.id == alice.id
        assert await repo.get_by_login("ALICE") is None

    @pytest.mark.asyncio
    async def test_duplicate_login(self, session: AsyncSession, alice: UserDB) -> None:
        with pytest.raises(DuplicateEntryError) as exc_info:
            await UserRepository(session).create(UserCreate(login="alice"))

        assert exc_info.value.status_code == 409
        assert exc_info.value.detail == "Login 'alice' already exists"


class TestRepositorySurface:
    """Blogs are deleted and owners looked up only through the dedicated methods."""

    @pytest.mark.parametrize("name", ["get_by_field", "delete"])
    def test_generic_lookups_are_not_offered(self, name: str) -> None:
        assert not hasattr(BlogRepository, name)
        assert not hasattr(UserRepository, name)
