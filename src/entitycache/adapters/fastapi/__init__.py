"""FastAPI adapter for entitycache."""

from entitycache.adapters.fastapi.dependencies import UseCases, get_use_cases
from entitycache.adapters.fastapi.errors import register_exception_handlers
from entitycache.adapters.fastapi.routes import (
    CACHE_STATUS_HEADER,
    comments_router,
    users_router,
)

__all__ = [
    "UseCases",
    "get_use_cases",
    "register_exception_handlers",
    "users_router",
    "comments_router",
    "CACHE_STATUS_HEADER",
]
