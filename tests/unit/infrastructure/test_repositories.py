"""Tests for the in-memory and SQLite repositories."""

from pathlib import Path

import pytest

from entitycache import (
    InMemoryCommentRepository,
    InMemoryUserRepository,
    SqliteCommentRepository,
    SqliteDatabase,
    SqliteUserRepository,
    UpstreamError,
    User,
)
from tests.constants import EMAIL, MISSING_ID, OTHER_USER_ID, USER_ID


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_lookup_by_id_and_email(
        self, user_repository: InMemoryUserRepository, user: User
    ) -> None:
        assert await user_repository.get_by_id(USER_ID) == user
        assert await user_repository.get_by_email(EMAIL) == user
        assert await user_repository.get_by_id(MISSING_ID) is None
        assert await user_repository.get_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_update_by_email(
        self, user_repository: InMemoryUserRepository
    ) -> None:
        updated = await user_repository.update_by_email(
            EMAIL, {"location": {"city": "Paris"}}
        )

        assert updated is not None
        assert updated.location.city == "Paris"
        assert updated.location.country == "UK"
        assert await user_repository.get_by_id(USER_ID) == updated

    @pytest.mark.asyncio
    async def test_update_missing(self, user_repository: InMemoryUserRepository) -> None:
        assert await user_repository.update_by_id(MISSING_ID, {"meta": {"firstname": "X"}}) is None
        assert await user_repository.update_by_email("x@y.com", {"meta": {"firstname": "X"}}) is None

    @pytest.mark.asyncio
    async def test_delete_returns_snapshot(
        self, user_repository: InMemoryUserRepository, user: User
    ) -> None:
        assert await user_repository.delete_by_email(EMAIL) == user
        assert await user_repository.get_by_id(USER_ID) is None
        assert await user_repository.delete_by_id(USER_ID) is None
        assert len(user_repository) == 1

    @pytest.mark.asyncio
    async def test_duplicate_create(
        self, user_repository: InMemoryUserRepository, make_user
    ) -> None:
        with pytest.raises(UpstreamError):
            await user_repository.create(make_user(user_id=MISSING_ID))


class TestInMemoryCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_filter_by_user(
        self, comment_repository: InMemoryCommentRepository
    ) -> None:
        assert len(await comment_repository.get_all()) == 2

        mine = await comment_repository.get_all(user_id=USER_ID)
        assert [c.user_id for c in mine] == [USER_ID]

    @pytest.mark.asyncio
    async def test_create_and_update(
        self, comment_repository: InMemoryCommentRepository
    ) -> None:
        created = await comment_repository.create(user_id=USER_ID, body="Hello")
        assert len(created.id) == 24

        updated = await comment_repository.update_by_id(created.id, {"body": "Edited"})
        assert updated is not None
        assert updated.body == "Edited"
        assert updated.created_at == created.created_at


class TestSqliteRepositories:
    """Tests for the aiosqlite-backed repositories."""

    @pytest.fixture
    async def database(self, tmp_path: Path) -> SqliteDatabase:
        database = SqliteDatabase(tmp_path / "data" / "test.db")
        await database.init_schema()
        return database

    @pytest.fixture
    async def users(self, database: SqliteDatabase, user: User) -> SqliteUserRepository:
        repository = SqliteUserRepository(database)
        await repository.create(user)
        return repository

    @pytest.mark.asyncio
    async def test_round_trip_user(self, users: SqliteUserRepository, user: User) -> None:
        assert await users.get_by_id(USER_ID) == user
        assert await users.get_by_email(EMAIL) == user
        assert await users.get_by_id(MISSING_ID) is None
        assert await users.get_all() == [user]

    @pytest.mark.asyncio
    async def test_nested_update_by_id(self, users: SqliteUserRepository) -> None:
        updated = await users.update_by_id(
            USER_ID,
            {"meta": {"firstname": "X"}, "location": {"country": "FR"}},
        )

        assert updated is not None
        assert updated.meta.firstname == "X"
        assert updated.meta.lastname == "Lovelace"
        assert updated.location.country == "FR"
        assert updated.location.city == "London"

    @pytest.mark.asyncio
    async def test_update_by_email_missing(self, users: SqliteUserRepository) -> None:
        result = await users.update_by_email("x@y.com", {"auth": {"password": "p"}})
        assert result is None

    @pytest.mark.asyncio
    async def test_update_rejects_unknown_field(self, users: SqliteUserRepository) -> None:
        with pytest.raises(KeyError):
            await users.update_by_id(USER_ID, {"meta": {"email": "x@y.com"}})

    @pytest.mark.asyncio
    async def test_delete_user(self, users: SqliteUserRepository, user: User) -> None:
        assert await users.delete_by_email(EMAIL) == user
        assert await users.get_by_id(USER_ID) is None
        assert await users.delete_by_id(USER_ID) is None

    @pytest.mark.asyncio
    async def test_duplicate_email_is_upstream_error(
        self, users: SqliteUserRepository, make_user
    ) -> None:
        with pytest.raises(UpstreamError):
            await users.create(make_user(user_id=OTHER_USER_ID))

    @pytest.mark.asyncio
    async def test_comments(self, database: SqliteDatabase) -> None:
        comments = SqliteCommentRepository(database)

        first = await comments.create(user_id=USER_ID, body="First!")
        await comments.create(user_id=OTHER_USER_ID, body="Second")

        assert await comments.get_by_id(first.id) == first
        assert len(await comments.get_all()) == 2
        assert await comments.get_all(user_id=USER_ID) == [first]

        updated = await comments.update_by_id(first.id, {"body": "Edited"})
        assert updated is not None
        assert updated.body == "Edited"
        assert await comments.update_by_id(MISSING_ID, {"body": "x"}) is None

        assert await comments.delete_by_id(first.id) == updated
        assert await comments.get_by_id(first.id) is None
        assert await comments.delete_by_id(first.id) is None
