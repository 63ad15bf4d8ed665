"""SQLite repository implementations backed by aiosqlite."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

import aiosqlite

from entitycache.core.entities.comment import Comment
from entitycache.core.entities.user import (
    USER_UPDATE_SECTIONS,
    User,
    UserAuth,
    UserLocation,
    UserMeta,
    UserUpdate,
)
from entitycache.core.exceptions import UpstreamError
from entitycache.utils.validation import new_object_id

logger = logging.getLogger(__name__)

USER_COLUMNS = frozenset(
    name for names in USER_UPDATE_SECTIONS.values() for name in names
)

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        email TEXT NOT NULL UNIQUE,
        firstname TEXT,
        lastname TEXT,
        password TEXT,
        city TEXT,
        country TEXT,
        created_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS comments (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        body TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
    """,
)


class SqliteDatabase:
    """Connection factory for a SQLite database file.

    A connection is opened per operation; aiosqlite runs each connection
    on its own worker thread so concurrent requests never share one.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[aiosqlite.Connection]:
        """Open a connection, translating driver errors to UpstreamError."""
        try:
            db = await aiosqlite.connect(self._path)
        except aiosqlite.Error as e:
            raise UpstreamError(f"Cannot open database {self._path}: {e}") from e

        db.row_factory = aiosqlite.Row
        try:
            yield db
        except aiosqlite.Error as e:
            logger.warning("Database operation failed: %s", e)
            raise UpstreamError(f"Database operation failed: {e}") from e
        finally:
            await db.close()

    async def init_schema(self) -> None:
        """Create the tables if they do not exist yet."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        async with self.connect() as db:
            for statement in SCHEMA:
                await db.execute(statement)
            await db.commit()
        logger.info("Initialized SQLite schema at %s", self._path)


def _row_to_user(row: aiosqlite.Row) -> User:
    """Convert a database row to a User."""
    return User(
        id=row["id"],
        email=row["email"],
        meta=UserMeta(firstname=row["firstname"], lastname=row["lastname"]),
        auth=UserAuth(password=row["password"]),
        location=UserLocation(city=row["city"], country=row["country"]),
        created_at=datetime.fromisoformat(row["created_at"]),
    )


def _row_to_comment(row: aiosqlite.Row) -> Comment:
    """Convert a database row to a Comment."""
    return Comment(
        id=row["id"],
        user_id=row["user_id"],
        body=row["body"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )


def _flatten_update(update: UserUpdate) -> dict[str, str]:
    """Flatten a nested user update into column assignments."""
    columns: dict[str, str] = {}
    for section, values in update.items():
        for name, value in values.items():
            if name not in USER_COLUMNS or name not in USER_UPDATE_SECTIONS[section]:
                raise KeyError(f"Unknown user field: {section}.{name}")
            columns[name] = value
    return columns


class SqliteUserRepository:
    """User persistence on a SQLite table."""

    def __init__(self, database: SqliteDatabase) -> None:
        self._database = database

    async def _fetch_one(self, where: str, value: str) -> User | None:
        async with self._database.connect() as db:
            cursor = await db.execute(f"SELECT * FROM users WHERE {where} = ?", (value,))
            row = await cursor.fetchone()
            return _row_to_user(row) if row else None

    async def get_by_id(self, user_id: str) -> User | None:
        return await self._fetch_one("id", user_id)

    async def get_by_email(self, email: str) -> User | None:
        return await self._fetch_one("email", email)

    async def get_all(self) -> list[User]:
        async with self._database.connect() as db:
            cursor = await db.execute("SELECT * FROM users ORDER BY created_at")
            rows = await cursor.fetchall()
            return [_row_to_user(row) for row in rows]

    async def create(self, user: User) -> User:
        async with self._database.connect() as db:
            await db.execute(
                """INSERT INTO users
                   (id, email, firstname, lastname, password, city, country, created_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    user.id,
                    user.email,
                    user.meta.firstname,
                    user.meta.lastname,
                    user.auth.password,
                    user.location.city,
                    user.location.country,
                    user.created_at.isoformat(),
                ),
            )
            await db.commit()
        return user

    async def _update(self, where: str, value: str, update: UserUpdate) -> User | None:
        columns = _flatten_update(update)
        if columns:
            assignments = ", ".join(f"{name} = ?" for name in columns)
            async with self._database.connect() as db:
                cursor = await db.execute(
                    f"UPDATE users SET {assignments} WHERE {where} = ?",
                    (*columns.values(), value),
                )
                await db.commit()
                if cursor.rowcount == 0:
                    return None
        return await self._fetch_one(where, value)

    async def update_by_id(self, user_id: str, update: UserUpdate) -> User | None:
        return await self._update("id", user_id, update)

    async def update_by_email(self, email: str, update: UserUpdate) -> User | None:
        return await self._update("email", email, update)

    async def _delete(self, where: str, value: str) -> User | None:
        async with self._database.connect() as db:
            cursor = await db.execute(f"SELECT * FROM users WHERE {where} = ?", (value,))
            row = await cursor.fetchone()
            if row is None:
                return None
            await db.execute(f"DELETE FROM users WHERE {where} = ?", (value,))
            await db.commit()
            return _row_to_user(row)

    async def delete_by_id(self, user_id: str) -> User | None:
        return await self._delete("id", user_id)

    async def delete_by_email(self, email: str) -> User | None:
        return await self._delete("email", email)


class SqliteCommentRepository:
    """Comment persistence on a SQLite table."""

    def __init__(self, database: SqliteDatabase) -> None:
        self._database = database

    async def get_by_id(self, comment_id: str) -> Comment | None:
        async with self._database.connect() as db:
            cursor = await db.execute(
                "SELECT * FROM comments WHERE id = ?", (comment_id,)
            )
            row = await cursor.fetchone()
            return _row_to_comment(row) if row else None

    async def get_all(self, user_id: str | None = None) -> list[Comment]:
        async with self._database.connect() as db:
            if user_id is None:
                cursor = await db.execute("SELECT * FROM comments ORDER BY created_at")
            else:
                cursor = await db.execute(
                    "SELECT * FROM comments WHERE user_id = ? ORDER BY created_at",
                    (user_id,),
                )
            rows = await cursor.fetchall()
            return [_row_to_comment(row) for row in rows]

    async def create(self, user_id: str, body: str) -> Comment:
        comment = Comment(
            id=new_object_id(),
            user_id=user_id,
            body=body,
            created_at=datetime.now(timezone.utc),
        )
        async with self._database.connect() as db:
            await db.execute(
                """INSERT INTO comments (id, user_id, body, created_at)
                   VALUES (?, ?, ?, ?)""",
                (comment.id, comment.user_id, comment.body, comment.created_at.isoformat()),
            )
            await db.commit()
        return comment

    async def update_by_id(
        self, comment_id: str, update: dict[str, str]
    ) -> Comment | None:
        body = update.get("body")
        if body is not None:
            async with self._database.connect() as db:
                cursor = await db.execute(
                    "UPDATE comments SET body = ? WHERE id = ?", (body, comment_id)
                )
                await db.commit()
                if cursor.rowcount == 0:
                    return None
        return await self.get_by_id(comment_id)

    async def delete_by_id(self, comment_id: str) -> Comment | None:
        async with self._database.connect() as db:
            cursor = await db.execute(
                "SELECT * FROM comments WHERE id = ?", (comment_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            await db.execute("DELETE FROM comments WHERE id = ?", (comment_id,))
            await db.commit()
            return _row_to_comment(row)
