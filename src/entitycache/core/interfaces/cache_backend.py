"""Cache backend interface."""

from typing import Any, Protocol


class ICacheBackend(Protocol):
    """Contract for the bounded entity cache.

    Methods are async so that implementations can serialize access with
    an asyncio lock shared by all request handlers.
    """

    async def has(self, key: str) -> bool:
        """Check if key is cached, without refreshing its recency.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        ...

    async def get(self, key: str) -> Any | None:
        """Retrieve a cached entity snapshot by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached snapshot, or None if not cached.
        """
        ...

    async def generation(self) -> int:
        """Return the current invalidation generation.

        Readers take it before fetching from persistence and hand it back
        to set, so that a fill racing a delete of the same key is dropped.
        """
        ...

    async def set(self, key: str, value: Any, generation: int | None = None) -> bool:
        """Store an entity snapshot, evicting the LRU entry when full.

        Args:
            key: The cache key.
            value: The snapshot to store.
            generation: Generation observed before the snapshot was read.

        Returns:
            False if key was deleted after generation, True otherwise.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Remove a cached entry.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        ...
