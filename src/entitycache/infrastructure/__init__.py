"""Infrastructure layer implementations for entitycache."""

from entitycache.infrastructure.backends import BoundedCache
from entitycache.infrastructure.key_builders import DefaultKeyBuilder
from entitycache.infrastructure.repositories import (
    InMemoryCommentRepository,
    InMemoryUserRepository,
    SqliteCommentRepository,
    SqliteDatabase,
    SqliteUserRepository,
)

__all__ = [
    "BoundedCache",
    "DefaultKeyBuilder",
    "InMemoryUserRepository",
    "InMemoryCommentRepository",
    "SqliteDatabase",
    "SqliteUserRepository",
    "SqliteCommentRepository",
]
