"""Composition root: builds the cache, repositories and use cases."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from entitycache.adapters.fastapi import (
    UseCases,
    comments_router,
    register_exception_handlers,
    users_router,
)
from entitycache.config import Settings
from entitycache.core.entities.cache_config import CacheConfig
from entitycache.core.entities.user import User, UserLocation, UserMeta
from entitycache.core.interfaces import ICommentRepository, IUserRepository
from entitycache.core.services import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    DeleteUserUseCase,
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

logger = logging.getLogger(__name__)

DEMO_USERS = (
    ("65a1f0c2e4b0a1b2c3d4e5f1", "alice@example.com", "Alice", "Martin", "Lyon", "France"),
    ("65a1f0c2e4b0a1b2c3d4e5f2", "bob@example.com", "Bob", "Silva", "Porto", "Portugal"),
    ("65a1f0c2e4b0a1b2c3d4e5f3", "carol@example.com", "Carol", "Nowak", "Krakow", "Poland"),
)


ENTITY_TYPES = ("users", "comments")


def build_caches(config: CacheConfig) -> dict[str, BoundedCache]:
    """Create one bounded cache per entity type.

    Users and comments share the identifier format, so they never share
    a key space.
    """
    return {name: BoundedCache(maxsize=config.max_size) for name in ENTITY_TYPES}


def build_use_cases(
    user_repository: IUserRepository,
    comment_repository: ICommentRepository,
    caches: dict[str, BoundedCache],
    config: CacheConfig,
) -> UseCases:
    """Wire the use cases of each entity type to that type's cache."""
    key_builder = DefaultKeyBuilder(separator=config.key_separator)
    users, comments = caches["users"], caches["comments"]
    return UseCases(
        fetch_user=FetchUserUseCase(user_repository, users, key_builder, config),
        update_user=UpdateUserUseCase(user_repository, users, key_builder, config),
        delete_user=DeleteUserUseCase(user_repository, users, key_builder, config),
        fetch_comments=FetchCommentsUseCase(
            comment_repository, comments, key_builder, config
        ),
        create_comment=CreateCommentUseCase(comment_repository, user_repository),
        update_comment=UpdateCommentUseCase(
            comment_repository, comments, key_builder, config
        ),
        delete_comment=DeleteCommentUseCase(
            comment_repository, comments, key_builder, config
        ),
    )


async def seed_demo_users(repository: IUserRepository) -> int:
    """Insert the demo users that are not present yet."""
    created = 0
    for user_id, email, firstname, lastname, city, country in DEMO_USERS:
        if await repository.get_by_id(user_id) is not None:
            continue
        await repository.create(
            User(
                id=user_id,
                email=email,
                meta=UserMeta(firstname=firstname, lastname=lastname),
                location=UserLocation(city=city, country=country),
                created_at=datetime.now(timezone.utc),
            )
        )
        created += 1
    return created


async def _open_repositories(
    settings: Settings,
) -> tuple[IUserRepository, ICommentRepository]:
    if not settings.database_path:
        logger.info("Using in-memory repositories")
        return InMemoryUserRepository(), InMemoryCommentRepository()

    database = SqliteDatabase(settings.database_path)
    await database.init_schema()
    return SqliteUserRepository(database), SqliteCommentRepository(database)


def create_app(
    settings: Settings | None = None,
    *,
    user_repository: IUserRepository | None = None,
    comment_repository: ICommentRepository | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    The cache is constructed once, when the application starts, and is
    shared by reference with every use case. Repositories may be passed
    in explicitly; otherwise they are chosen from settings.
    """
    settings = settings or Settings.from_env()
    logging.getLogger("entitycache").setLevel(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        users, comments = user_repository, comment_repository
        if users is None or comments is None:
            default_users, default_comments = await _open_repositories(settings)
            if users is None:
                users = default_users
            if comments is None:
                comments = default_comments

        if settings.seed_demo_data:
            count = await seed_demo_users(users)
            logger.info("Seeded %d demo user(s)", count)

        caches = build_caches(settings.cache)
        logger.info(
            "Initialized entity caches %s (maxsize=%d)",
            sorted(caches),
            settings.cache.max_size,
        )

        app.state.caches = caches
        app.state.use_cases = build_use_cases(users, comments, caches, settings.cache)
        yield
        for name, cache in caches.items():
            logger.info("Shutting down, final %s cache stats: %s", name, cache.stats)

    app = FastAPI(
        title="entitycache",
        description="User and comment CRUD API with an in-process LRU read cache",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    register_exception_handlers(app)
    app.include_router(users_router)
    app.include_router(comments_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "cache_enabled": settings.cache.enabled,
        }

    @app.get("/cache/stats")
    async def cache_stats():
        """Get cache statistics."""
        return {
            "stats": {
                name: cache.stats for name, cache in app.state.caches.items()
            },
            "config": {
                "enabled": settings.cache.enabled,
                "max_size": settings.cache.max_size,
                "invalidate_related_keys": settings.cache.invalidate_related_keys,
            },
        }

    return app


def main() -> None:
    """Run the API with uvicorn, configured from the environment."""
    import uvicorn

    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(settings), host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
