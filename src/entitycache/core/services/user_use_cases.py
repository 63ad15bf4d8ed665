"""User use cases."""

import logging
from collections.abc import Mapping
from typing import Any

from entitycache.core.entities.cache_config import CacheConfig
from entitycache.core.entities.lookup_query import ByEmail, ById, ListAll, LookupQuery
from entitycache.core.entities.user import User, UserPatch
from entitycache.core.exceptions import NotFoundError, ValidationFailureError
from entitycache.core.interfaces.cache_backend import ICacheBackend
from entitycache.core.interfaces.key_builder import IKeyBuilder
from entitycache.core.interfaces.repositories import IUserRepository
from entitycache.core.services.lookup import EntityLookupUseCase
from entitycache.core.services.mutation import EntityMutationUseCase

logger = logging.getLogger(__name__)


class FetchUserUseCase(EntityLookupUseCase[User]):
    """Fetch a user by id or email through the cache, or list all users."""

    entity_name = "User"

    def __init__(
        self,
        repository: IUserRepository,
        cache: ICacheBackend,
        key_builder: IKeyBuilder,
        config: CacheConfig | None = None,
    ) -> None:
        super().__init__(cache, key_builder, config)
        self._repository = repository

    async def _fetch_one(self, query: ById | ByEmail) -> User | None:
        if isinstance(query, ById):
            return await self._repository.get_by_id(query.id)
        return await self._repository.get_by_email(query.email)

    async def _fetch_all(self, query: ListAll) -> list[User]:
        return await self._repository.get_all()


class UpdateUserUseCase(EntityMutationUseCase):
    """Apply a partial update to a user addressed by id or email."""

    entity_name = "User"

    def __init__(
        self,
        repository: IUserRepository,
        cache: ICacheBackend,
        key_builder: IKeyBuilder,
        config: CacheConfig | None = None,
    ) -> None:
        super().__init__(cache, key_builder, config)
        self._repository = repository

    async def execute(
        self,
        query: LookupQuery,
        patch: UserPatch | Mapping[str, Any],
    ) -> User:
        """Update the user and evict any cached snapshot of it.

        Args:
            query: Must address exactly one user.
            patch: A UserPatch, or a raw flat payload to validate.

        Returns:
            The updated user.

        Raises:
            InvalidRequestError: If the query does not address one user.
            ValidationFailureError: If the patch is invalid or empty.
            NotFoundError: If the user does not exist.
        """
        target = self._require_target(query)

        if not isinstance(patch, UserPatch):
            patch = UserPatch.from_dict(patch)
        if patch.is_empty():
            raise ValidationFailureError("No fields to update.")

        update = patch.to_update()
        if isinstance(target, ById):
            user = await self._repository.update_by_id(target.id, update)
        else:
            user = await self._repository.update_by_email(target.email, update)

        if user is None:
            raise NotFoundError("User not found.")

        logger.info("Updated user %s (sections: %s)", user.id, sorted(update))
        await self._reconcile(target, user)
        return user


class DeleteUserUseCase(EntityMutationUseCase):
    """Delete a user addressed by id or email."""

    entity_name = "User"

    def __init__(
        self,
        repository: IUserRepository,
        cache: ICacheBackend,
        key_builder: IKeyBuilder,
        config: CacheConfig | None = None,
    ) -> None:
        super().__init__(cache, key_builder, config)
        self._repository = repository

    async def execute(self, query: LookupQuery) -> User:
        """Delete the user and evict any cached snapshot of it.

        Returns:
            The deleted user.

        Raises:
            InvalidRequestError: If the query does not address one user.
            NotFoundError: If the user does not exist.
        """
        target = self._require_target(query)

        if isinstance(target, ById):
            user = await self._repository.delete_by_id(target.id)
        else:
            user = await self._repository.delete_by_email(target.email)

        if user is None:
            raise NotFoundError("User not found.")

        logger.info("Deleted user %s", user.id)
        await self._reconcile(target, user)
        return user
