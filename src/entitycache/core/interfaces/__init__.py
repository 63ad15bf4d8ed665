"""Core interfaces (Protocol classes) for entitycache."""

from entitycache.core.interfaces.cache_backend import ICacheBackend
from entitycache.core.interfaces.key_builder import IKeyBuilder
from entitycache.core.interfaces.repositories import (
    ICommentRepository,
    IUserRepository,
)

__all__ = [
    "ICacheBackend",
    "IKeyBuilder",
    "IUserRepository",
    "ICommentRepository",
]
