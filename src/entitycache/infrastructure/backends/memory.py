"""In-memory bounded cache implementation."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from cachetools import LRUCache  # type: ignore[import-untyped]

from entitycache.core.entities.cache_entry import CacheEntry

logger = logging.getLogger(__name__)


class _EvictionAwareLRUCache(LRUCache):
    """LRUCache that reports the items it evicts under capacity pressure."""

    def __init__(self, maxsize: int, on_evict: Callable[[str, Any], None]) -> None:
        super().__init__(maxsize=maxsize)
        self._on_evict = on_evict

    def popitem(self) -> tuple[str, Any]:
        key, value = super().popitem()
        self._on_evict(key, value)
        return key, value


class BoundedCache:
    """Fixed-capacity LRU cache of entity snapshots.

    Shared by every request handler of the process. Uses cachetools for
    LRU ordering: get and set refresh recency, has does not, and an
    insertion beyond capacity evicts the single least-recently-used
    entry. The ordering structure is mutated on reads too, so every
    operation runs under one asyncio lock.

    Invalidation generations:
        Every delete advances a process-wide generation counter and
        records it against the deleted key. A reader that missed takes
        the current generation before fetching from persistence and
        passes it back to set; the write is dropped if the key was
        deleted in the meantime. Invalidation records are kept in their
        own LRU of the same capacity; when one is dropped its generation
        becomes a floor below which every guarded write is refused.
    """

    def __init__(self, maxsize: int = 1000) -> None:
        """Initialize the bounded cache.

        Args:
            maxsize: Maximum number of entries in the cache.
        """
        if maxsize < 1:
            raise ValueError(f"maxsize must be positive, got {maxsize}")

        self._maxsize = maxsize
        self._cache: LRUCache[str, CacheEntry] = _EvictionAwareLRUCache(
            maxsize=maxsize,
            on_evict=self._record_eviction,
        )
        self._lock = asyncio.Lock()

        # Invalidation tracking
        self._generation = 0
        self._generation_floor = 0
        self._invalidated: LRUCache[str, int] = _EvictionAwareLRUCache(
            maxsize=maxsize,
            on_evict=self._raise_floor,
        )

        # Statistics
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._rejected = 0

    async def has(self, key: str) -> bool:
        """Check if key exists in cache.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        async with self._lock:
            return key in self._cache

    async def get(self, key: str) -> Any | None:
        """Retrieve a cached snapshot by key and mark it recently used.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if not found.
        """
        async with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._misses += 1
                return None
            self._hits += 1
            return entry.value

    async def generation(self) -> int:
        """Return the current invalidation generation."""
        async with self._lock:
            return self._generation

    async def set(self, key: str, value: Any, generation: int | None = None) -> bool:
        """Store a snapshot under key.

        Args:
            key: The cache key.
            value: The value to store.
            generation: Generation observed before the value was read from
                persistence. If key was deleted since, nothing is stored.

        Returns:
            True if the value was stored, False if it was refused as stale.
        """
        entry = CacheEntry.create(key=key, value=value)
        async with self._lock:
            if generation is not None and self._is_stale(key, generation):
                self._rejected += 1
                logger.debug("Refused stale write for cache key %r", key)
                return False
            self._cache[key] = entry
            return True

    async def delete(self, key: str) -> bool:
        """Delete a cached entry and invalidate in-flight writes for it.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        async with self._lock:
            self._generation += 1
            self._invalidated[key] = self._generation
            return self._cache.pop(key, None) is not None

    def _is_stale(self, key: str, generation: int) -> bool:
        if generation < self._generation_floor:
            return True
        return self._invalidated.get(key, 0) > generation

    def _record_eviction(self, key: str, entry: CacheEntry) -> None:
        self._evictions += 1
        logger.debug("Evicted least-recently-used cache entry %r", key)

    def _raise_floor(self, key: str, generation: int) -> None:
        self._generation_floor = max(self._generation_floor, generation)

    def __len__(self) -> int:
        """Return the number of entries in the cache."""
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, evictions, refused stale writes
            and current size.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "rejected_writes": self._rejected,
            "size": len(self._cache),
            "maxsize": self._maxsize,
        }
