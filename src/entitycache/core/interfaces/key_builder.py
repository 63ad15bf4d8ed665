"""Key builder interface."""

from typing import Any, Protocol

from entitycache.core.entities.lookup_query import LookupQuery


class IKeyBuilder(Protocol):
    """Contract for deriving cache keys from lookup queries.

    Key builders are responsible for creating deterministic keys, and
    for listing every key a given entity may be cached under so that
    mutations can reconcile all of them.
    """

    def derive(self, query: LookupQuery) -> str | None:
        """Derive the cache key for a lookup query.

        Args:
            query: The lookup query.

        Returns:
            The cache key, or None for collection queries.
        """
        ...

    def related_keys(self, entity: Any) -> list[str]:
        """List every key the given entity snapshot may be cached under.

        Args:
            entity: A User or Comment snapshot.

        Returns:
            The candidate cache keys.
        """
        ...
