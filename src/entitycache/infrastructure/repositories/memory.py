"""In-memory repository implementations.

Suitable for tests and single-process demos. Records are immutable
dataclasses, so returning them directly never leaks mutable state.
"""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime, timezone

from entitycache.core.entities.comment import Comment
from entitycache.core.entities.user import User, UserUpdate
from entitycache.core.exceptions import UpstreamError
from entitycache.utils.validation import new_object_id


class InMemoryUserRepository:
    """Dictionary-backed user store keyed by id."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: dict[str, User] = {user.id: user for user in users}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def get_all(self) -> list[User]:
        return list(self._users.values())

    async def create(self, user: User) -> User:
        if user.id in self._users or await self.get_by_email(user.email):
            raise UpstreamError(f"Duplicate user: {user.id} / {user.email}")
        self._users[user.id] = user
        return user

    async def update_by_id(self, user_id: str, update: UserUpdate) -> User | None:
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = user.apply_update(update)
        self._users[user_id] = updated
        return updated

    async def update_by_email(self, email: str, update: UserUpdate) -> User | None:
        user = await self.get_by_email(email)
        if user is None:
            return None
        return await self.update_by_id(user.id, update)

    async def delete_by_id(self, user_id: str) -> User | None:
        return self._users.pop(user_id, None)

    async def delete_by_email(self, email: str) -> User | None:
        user = await self.get_by_email(email)
        if user is None:
            return None
        return self._users.pop(user.id, None)

    def __len__(self) -> int:
        return len(self._users)


class InMemoryCommentRepository:
    """Dictionary-backed comment store keyed by id."""

    def __init__(self, comments: Iterable[Comment] = ()) -> None:
        self._comments: dict[str, Comment] = {c.id: c for c in comments}

    async def get_by_id(self, comment_id: str) -> Comment | None:
        return self._comments.get(comment_id)

    async def get_all(self, user_id: str | None = None) -> list[Comment]:
        return [
            comment for comment in self._comments.values()
            if user_id is None or comment.user_id == user_id
        ]

    async def create(self, user_id: str, body: str) -> Comment:
        comment = Comment(
            id=new_object_id(),
            user_id=user_id,
            body=body,
            created_at=datetime.now(timezone.utc),
        )
        self._comments[comment.id] = comment
        return comment

    async def update_by_id(
        self, comment_id: str, update: dict[str, str]
    ) -> Comment | None:
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = replace(comment, **update)
        self._comments[comment_id] = updated
        return updated

    async def delete_by_id(self, comment_id: str) -> Comment | None:
        return self._comments.pop(comment_id, None)

    def __len__(self) -> int:
        return len(self._comments)
