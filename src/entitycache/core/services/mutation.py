"""Write-through mutations with cache reconciliation."""

import logging
from typing import Any

from entitycache.core.entities.cache_config import CacheConfig
from entitycache.core.entities.lookup_query import ByEmail, ById, LookupQuery
from entitycache.core.exceptions import InvalidRequestError
from entitycache.core.interfaces.cache_backend import ICacheBackend
from entitycache.core.interfaces.key_builder import IKeyBuilder
from entitycache.utils.validation import validate_email, validate_object_id

logger = logging.getLogger(__name__)


class EntityMutationUseCase:
    """Base for update and delete use cases.

    Mutations never read through the cache. After persistence confirms
    the write, the entry at the key derived from the request is evicted.
    With CacheConfig.invalidate_related_keys, every other key the
    returned snapshot may be cached under is evicted as well, so a user
    updated by id is no longer served by a stale entry cached by email.
    """

    entity_name = "Entity"

    def __init__(
        self,
        cache: ICacheBackend,
        key_builder: IKeyBuilder,
        config: CacheConfig | None = None,
    ) -> None:
        self._cache = cache
        self._key_builder = key_builder
        self._config = config or CacheConfig()

    def _require_target(self, query: LookupQuery) -> ById | ByEmail:
        """Check that query addresses exactly one entity.

        Raises:
            InvalidRequestError: For collection queries or malformed
                identifiers.
        """
        if isinstance(query, ById):
            validate_object_id(query.id)
            if query.parent_id is not None:
                validate_object_id(query.parent_id)
            return query
        if isinstance(query, ByEmail):
            validate_email(query.email)
            return query
        raise InvalidRequestError("No query is provided.")

    async def _reconcile(self, query: LookupQuery, entity: Any) -> list[str]:
        """Evict every cache key that may now hold a stale snapshot.

        Args:
            query: The query the mutation was addressed with.
            entity: The snapshot returned by persistence.

        Returns:
            The keys that were actually evicted.
        """
        keys: list[str] = []
        key = self._key_builder.derive(query)
        if key is not None:
            keys.append(key)
        if self._config.invalidate_related_keys:
            keys.extend(k for k in self._key_builder.related_keys(entity) if k not in keys)

        evicted = [k for k in keys if await self._cache.delete(k)]
        if evicted:
            logger.info("Invalidated cached %s entries %s", self.entity_name, evicted)
        return evicted
