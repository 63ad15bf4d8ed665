"""Default key builder implementation."""

from typing import Any

from entitycache.core.entities.comment import Comment
from entitycache.core.entities.lookup_query import ByEmail, ById, ListAll, LookupQuery
from entitycache.core.entities.user import User


class DefaultKeyBuilder:
    """Default key builder using identifier values verbatim.

    Keys are the identifier value itself. A lookup by id that carries a
    parent (association) id is scoped as "<parent_id><separator><id>" so
    that the same id under unrelated parents never collides. The same
    join rule is used when populating and when invalidating.
    """

    def __init__(self, separator: str = ":") -> None:
        """Initialize the key builder.

        Args:
            separator: Separator between the parent id and the entity id.
        """
        self._separator = separator

    def derive(self, query: LookupQuery) -> str | None:
        """Derive the cache key for a lookup query.

        Args:
            query: The lookup query.

        Returns:
            The cache key, or None for collection queries.
        """
        if isinstance(query, ById):
            if query.parent_id:
                return self.scoped(query.parent_id, query.id)
            return query.id
        if isinstance(query, ByEmail):
            return query.email
        if isinstance(query, ListAll):
            return None
        raise TypeError(f"Unsupported lookup query: {query!r}")

    def scoped(self, parent_id: str, entity_id: str) -> str:
        """Build the parent-scoped key for an entity id."""
        return f"{parent_id}{self._separator}{entity_id}"

    def related_keys(self, entity: Any) -> list[str]:
        """List every key the given entity snapshot may be cached under.

        Args:
            entity: A User or Comment snapshot.

        Returns:
            The candidate cache keys.
        """
        if isinstance(entity, User):
            return [entity.id, entity.email]
        if isinstance(entity, Comment):
            return [entity.id, self.scoped(entity.user_id, entity.id)]
        raise TypeError(f"Unsupported entity: {type(entity).__name__}")
