"""entitycache - User and comment API with an in-process read cache.

A bounded LRU cache sits in front of the persistence layer. Entities can
be looked up by primary id or by a secondary unique field (email), and
every lookup reports whether it was served from the cache.

Example:
    from entitycache import (
        BoundedCache,
        ById,
        ByEmail,
        CacheConfig,
        DefaultKeyBuilder,
        FetchUserUseCase,
        InMemoryUserRepository,
        UpdateUserUseCase,
    )

    config = CacheConfig(max_size=500)
    cache = BoundedCache(maxsize=config.max_size)
    key_builder = DefaultKeyBuilder()
    users = InMemoryUserRepository()

    fetch_user = FetchUserUseCase(users, cache, key_builder, config)
    update_user = UpdateUserUseCase(users, cache, key_builder, config)

    result = await fetch_user.execute(ByEmail("a@b.com"))
    result.origin  # CacheOrigin.MISS, then CacheOrigin.HIT on the next call

    # Evicts "a@b.com" and the user's id key from the cache
    await update_user.execute(ById(result.value.id), {"firstname": "X"})

HTTP application:
    from entitycache.app import create_app

    app = create_app()  # settings from ENTITYCACHE_* environment variables
"""

from entitycache.core.entities import (
    ByEmail,
    ById,
    CacheConfig,
    CacheEntry,
    CacheOrigin,
    Comment,
    CommentPatch,
    ListAll,
    LookupQuery,
    LookupResult,
    NewComment,
    User,
    UserPatch,
    parse_lookup_query,
    parse_target_query,
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
from entitycache.core.services import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    DeleteUserUseCase,
    EntityLookupUseCase,
    EntityMutationUseCase,
    FetchCommentsUseCase,
    FetchUserUseCase,
    UpdateCommentUseCase,
    UpdateUserUseCase,
)
from entitycache.infrastructure import (
    BoundedCache,
    DefaultKeyBuilder,
    InMemoryCommentRepository,
    InMemoryUserRepository,
    SqliteCommentRepository,
    SqliteDatabase,
    SqliteUserRepository,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheConfig",
    "CacheEntry",
    "CacheOrigin",
    "LookupResult",
    "User",
    "UserPatch",
    "Comment",
    "NewComment",
    "CommentPatch",
    # Lookup queries
    "ById",
    "ByEmail",
    "ListAll",
    "LookupQuery",
    "parse_lookup_query",
    "parse_target_query",
    # Errors
    "EntityCacheError",
    "InvalidRequestError",
    "ValidationFailureError",
    "NotFoundError",
    "UpstreamError",
    # Core interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "IUserRepository",
    "ICommentRepository",
    # Use cases
    "EntityLookupUseCase",
    "EntityMutationUseCase",
    "FetchUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "FetchCommentsUseCase",
    "CreateCommentUseCase",
    "UpdateCommentUseCase",
    "DeleteCommentUseCase",
    # Infrastructure implementations
    "BoundedCache",
    "DefaultKeyBuilder",
    "InMemoryUserRepository",
    "InMemoryCommentRepository",
    "SqliteDatabase",
    "SqliteUserRepository",
    "SqliteCommentRepository",
]
