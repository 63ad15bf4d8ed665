"""Comment use cases.

Comments are sub-entities of users. A comment lookup by id may carry
the author's id as parent_id, in which case the cache key is scoped to
that author and a comment written by someone else is reported as not
found.
"""

import logging
from collections.abc import Mapping
from typing import Any, cast

from entitycache.core.entities.cache_config import CacheConfig
from entitycache.core.entities.comment import Comment, CommentPatch, NewComment
from entitycache.core.entities.lookup_query import ByEmail, ById, ListAll, LookupQuery
from entitycache.core.exceptions import InvalidRequestError, NotFoundError
from entitycache.core.interfaces.cache_backend import ICacheBackend
from entitycache.core.interfaces.key_builder import IKeyBuilder
from entitycache.core.interfaces.repositories import (
    ICommentRepository,
    IUserRepository,
)
from entitycache.core.services.lookup import EntityLookupUseCase
from entitycache.core.services.mutation import EntityMutationUseCase
from entitycache.utils.validation import validate_object_id

logger = logging.getLogger(__name__)


def _reject_email(query: LookupQuery) -> None:
    if isinstance(query, ByEmail):
        raise InvalidRequestError("Comments cannot be looked up by email.")


def _belongs_to(comment: Comment | None, parent_id: str | None) -> bool:
    return comment is not None and (parent_id is None or comment.user_id == parent_id)


class FetchCommentsUseCase(EntityLookupUseCase[Comment]):
    """Fetch one comment through the cache, or list comments."""

    entity_name = "Comment"

    def __init__(
        self,
        repository: ICommentRepository,
        cache: ICacheBackend,
        key_builder: IKeyBuilder,
        config: CacheConfig | None = None,
    ) -> None:
        super().__init__(cache, key_builder, config)
        self._repository = repository

    def validate(self, query: LookupQuery) -> None:
        _reject_email(query)
        super().validate(query)

    async def _fetch_one(self, query: ById | ByEmail) -> Comment | None:
        by_id = cast(ById, query)  # ByEmail is rejected in validate()
        comment = await self._repository.get_by_id(by_id.id)
        return comment if _belongs_to(comment, by_id.parent_id) else None

    async def _fetch_all(self, query: ListAll) -> list[Comment]:
        return await self._repository.get_all(user_id=query.parent_id)


class CreateCommentUseCase:
    """Create a comment for an existing user. Never touches the cache."""

    def __init__(
        self,
        repository: ICommentRepository,
        user_repository: IUserRepository,
    ) -> None:
        self._repository = repository
        self._user_repository = user_repository

    async def execute(self, payload: NewComment | Mapping[str, Any]) -> Comment:
        """Validate the payload and persist the comment.

        Raises:
            ValidationFailureError: If the payload is invalid.
            InvalidRequestError: If user_id is malformed.
            NotFoundError: If the author does not exist.
        """
        if not isinstance(payload, NewComment):
            payload = NewComment.from_dict(payload)

        user_id = validate_object_id(payload.user_id)
        if await self._user_repository.get_by_id(user_id) is None:
            raise NotFoundError(f'User with id "{user_id}" does not exist.')

        comment = await self._repository.create(user_id=user_id, body=payload.body)
        logger.info("Created comment %s for user %s", comment.id, user_id)
        return comment


class _CommentMutationUseCase(EntityMutationUseCase):
    entity_name = "Comment"

    def __init__(
        self,
        repository: ICommentRepository,
        cache: ICacheBackend,
        key_builder: IKeyBuilder,
        config: CacheConfig | None = None,
    ) -> None:
        super().__init__(cache, key_builder, config)
        self._repository = repository

    def _require_comment(self, query: LookupQuery) -> ById:
        _reject_email(query)
        return cast(ById, self._require_target(query))

    async def _check_owner(self, target: ById) -> None:
        """Raise NotFoundError if the comment is not written by parent_id."""
        if target.parent_id is None:
            return
        existing = await self._repository.get_by_id(target.id)
        if not _belongs_to(existing, target.parent_id):
            raise NotFoundError("Comment not found.")


class UpdateCommentUseCase(_CommentMutationUseCase):
    """Replace the body of a comment."""

    async def execute(
        self,
        query: LookupQuery,
        patch: CommentPatch | Mapping[str, Any],
    ) -> Comment:
        target = self._require_comment(query)

        if not isinstance(patch, CommentPatch):
            patch = CommentPatch.from_dict(patch)

        await self._check_owner(target)

        comment = await self._repository.update_by_id(target.id, patch.to_update())
        if comment is None:
            raise NotFoundError("Comment not found.")

        logger.info("Updated comment %s", comment.id)
        await self._reconcile(target, comment)
        return comment


class DeleteCommentUseCase(_CommentMutationUseCase):
    """Delete a comment."""

    async def execute(self, query: LookupQuery) -> Comment:
        target = self._require_comment(query)
        await self._check_owner(target)

        comment = await self._repository.delete_by_id(target.id)
        if comment is None:
            raise NotFoundError("Comment not found.")

        logger.info("Deleted comment %s", comment.id)
        await self._reconcile(target, comment)
        return comment
