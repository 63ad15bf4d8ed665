"""Core domain layer for entitycache."""

from entitycache.core.entities import (
    CacheConfig,
    CacheEntry,
    CacheOrigin,
    LookupQuery,
    LookupResult,
)
from entitycache.core.exceptions import (
    EntityCacheError,
    InvalidRequestError,
    NotFoundError,
    UpstreamError,
    ValidationFailureError,
)
from entitycache.core.interfaces import (
    ICacheBackend,
    ICommentRepository,
    IKeyBuilder,
    IUserRepository,
)

__all__ = [
    # Entities
    "CacheConfig",
    "CacheEntry",
    "CacheOrigin",
    "LookupQuery",
    "LookupResult",
    # Errors
    "EntityCacheError",
    "InvalidRequestError",
    "ValidationFailureError",
    "NotFoundError",
    "UpstreamError",
    # Interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "IUserRepository",
    "ICommentRepository",
]
