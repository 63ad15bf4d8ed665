"""Persistence service interfaces.

Repositories are the source of truth. Missing records are reported as
None, never as an exception; driver failures surface as UpstreamError.
"""

from typing import Protocol

from entitycache.core.entities.comment import Comment
from entitycache.core.entities.user import User, UserUpdate


class IUserRepository(Protocol):
    """Contract for user persistence."""

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def get_all(self) -> list[User]: ...

    async def create(self, user: User) -> User: ...

    async def update_by_id(self, user_id: str, update: UserUpdate) -> User | None:
        """Apply a nested update and return the updated user, if any."""
        ...

    async def update_by_email(self, email: str, update: UserUpdate) -> User | None: ...

    async def delete_by_id(self, user_id: str) -> User | None:
        """Delete a user and return the deleted snapshot, if any."""
        ...

    async def delete_by_email(self, email: str) -> User | None: ...


class ICommentRepository(Protocol):
    """Contract for comment persistence."""

    async def get_by_id(self, comment_id: str) -> Comment | None: ...

    async def get_all(self, user_id: str | None = None) -> list[Comment]:
        """List comments, optionally only those written by user_id."""
        ...

    async def create(self, user_id: str, body: str) -> Comment: ...

    async def update_by_id(
        self, comment_id: str, update: dict[str, str]
    ) -> Comment | None: ...

    async def delete_by_id(self, comment_id: str) -> Comment | None: ...
