"""Cache-checked entity lookup."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from entitycache.core.entities.cache_config import CacheConfig
from entitycache.core.entities.lookup_query import ByEmail, ById, ListAll, LookupQuery
from entitycache.core.entities.lookup_result import CacheOrigin, LookupResult
from entitycache.core.exceptions import InvalidRequestError, NotFoundError
from entitycache.core.interfaces.cache_backend import ICacheBackend
from entitycache.core.interfaces.key_builder import IKeyBuilder
from entitycache.utils.validation import validate_email, validate_object_id

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntityLookupUseCase(ABC, Generic[T]):
    """Reads a single entity through the cache, or a collection around it.

    Subclasses bind the persistence calls for one entity type. The read
    protocol is:

    1. Validate the query before touching the cache.
    2. Collection queries have no key: fetch from persistence and
       report NOT_APPLICABLE.
    3. Cached key: return the snapshot and report HIT without calling
       persistence.
    4. Otherwise take the cache generation and fetch by the identifier
       field present. Absent entities raise NotFoundError and nothing
       is cached.
    5. Cache the fetched snapshot, unless the key was invalidated while
       fetching, and report MISS.

    Two concurrent misses on the same key may both fetch and both
    populate; the last write wins.
    """

    entity_name = "Entity"

    def __init__(
        self,
        cache: ICacheBackend,
        key_builder: IKeyBuilder,
        config: CacheConfig | None = None,
    ) -> None:
        """Initialize the lookup use case.

        Args:
            cache: The shared bounded cache.
            key_builder: Derives cache keys from lookup queries.
            config: Optional cache configuration. Uses defaults if not provided.
        """
        self._cache = cache
        self._key_builder = key_builder
        self._config = config or CacheConfig()

    async def execute(self, query: LookupQuery) -> LookupResult[Any]:
        """Fetch the entity or collection addressed by query.

        Args:
            query: The lookup query.

        Returns:
            The value and its cache origin.

        Raises:
            InvalidRequestError: If the query is malformed.
            NotFoundError: If no entity matches a single-entity query.
        """
        self.validate(query)

        key = self._key_builder.derive(query)
        if key is None:
            items = await self._fetch_all(query)
            return LookupResult(items, CacheOrigin.NOT_APPLICABLE)

        if self._config.enabled:
            cached = await self._cache.get(key)
            if cached is not None:
                logger.debug("Cache HIT for %s %r", self.entity_name, key)
                return LookupResult(cached, CacheOrigin.HIT)

        logger.debug("Cache MISS for %s %r", self.entity_name, key)
        generation = await self._cache.generation()
        entity = await self._fetch_one(query)
        if entity is None:
            raise NotFoundError(self._not_found_message(query))

        if self._config.enabled:
            if not await self._cache.set(key, entity, generation=generation):
                logger.debug(
                    "Not caching %s %r: invalidated during fetch",
                    self.entity_name,
                    key,
                )

        return LookupResult(entity, CacheOrigin.MISS)

    async def is_cached(self, query: LookupQuery) -> bool:
        """Check whether the entity addressed by query is currently cached.

        Collection queries are never cached.
        """
        key = self._key_builder.derive(query)
        if key is None:
            return False
        return await self._cache.has(key)

    def validate(self, query: LookupQuery) -> None:
        """Validate identifier values. Raises InvalidRequestError."""
        if isinstance(query, ById):
            validate_object_id(query.id)
            if query.parent_id is not None:
                validate_object_id(query.parent_id)
        elif isinstance(query, ByEmail):
            validate_email(query.email)
        elif isinstance(query, ListAll):
            if query.parent_id is not None:
                validate_object_id(query.parent_id)
        else:
            raise InvalidRequestError(f"Unsupported query: {query!r}")

    def _not_found_message(self, query: LookupQuery) -> str:
        if isinstance(query, ById):
            return f'{self.entity_name} with id "{query.id}" does not exist.'
        if isinstance(query, ByEmail):
            return f'{self.entity_name} with email "{query.email}" does not exist.'
        return f"{self.entity_name} not found."

    @abstractmethod
    async def _fetch_one(self, query: ById | ByEmail) -> T | None:
        """Fetch a single entity from persistence."""

    @abstractmethod
    async def _fetch_all(self, query: ListAll) -> list[T]:
        """Fetch a collection from persistence."""
