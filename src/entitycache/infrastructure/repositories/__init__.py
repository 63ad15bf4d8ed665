"""Persistence implementations."""

from entitycache.infrastructure.repositories.memory import (
    InMemoryCommentRepository,
    InMemoryUserRepository,
)
from entitycache.infrastructure.repositories.sqlite import (
    SqliteCommentRepository,
    SqliteDatabase,
    SqliteUserRepository,
)

__all__ = [
    "InMemoryUserRepository",
    "InMemoryCommentRepository",
    "SqliteDatabase",
    "SqliteUserRepository",
    "SqliteCommentRepository",
]
