"""Cache backend implementations."""

from entitycache.infrastructure.backends.memory import BoundedCache

__all__ = ["BoundedCache"]
