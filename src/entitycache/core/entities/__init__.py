"""Domain entities for entitycache."""

from entitycache.core.entities.cache_config import CacheConfig
from entitycache.core.entities.cache_entry import CacheEntry
from entitycache.core.entities.comment import Comment, CommentPatch, NewComment
from entitycache.core.entities.lookup_query import (
    ByEmail,
    ById,
    ListAll,
    LookupQuery,
    parse_lookup_query,
    parse_target_query,
)
from entitycache.core.entities.lookup_result import CacheOrigin, LookupResult
from entitycache.core.entities.user import (
    User,
    UserAuth,
    UserLocation,
    UserMeta,
    UserPatch,
)

__all__ = [
    "CacheConfig",
    "CacheEntry",
    # Lookup
    "ById",
    "ByEmail",
    "ListAll",
    "LookupQuery",
    "parse_lookup_query",
    "parse_target_query",
    "CacheOrigin",
    "LookupResult",
    # Users
    "User",
    "UserMeta",
    "UserAuth",
    "UserLocation",
    "UserPatch",
    # Comments
    "Comment",
    "NewComment",
    "CommentPatch",
]
