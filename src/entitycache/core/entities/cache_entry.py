"""Cache entry entity."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Represents an entity snapshot stored in the bounded cache. Recency
    is not stored on the entry itself: it is the position of the entry
    in the cache's LRU ordering.
    """

    key: str
    value: Any
    created_at: datetime

    @classmethod
    def create(cls, key: str, value: Any) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            key: The cache key.
            value: The entity snapshot to cache.

        Returns:
            A new CacheEntry instance.
        """
        return cls(
            key=key,
            value=value,
            created_at=datetime.now(timezone.utc),
        )
