"""Application settings."""

import os
from dataclasses import dataclass, field

from entitycache.core.entities.cache_config import CacheConfig

ENV_PREFIX = "ENTITYCACHE_"


def _env(name: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_bool(name: str, default: bool) -> bool:
    return _env(name, str(default)).lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Process-wide settings, read once at startup.

    An empty database_path selects the in-memory repositories.
    """

    cache: CacheConfig = field(default_factory=CacheConfig)
    database_path: str = ""
    seed_demo_data: bool = False
    log_level: str = "INFO"
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ENTITYCACHE_* environment variables."""
        cache = CacheConfig(
            enabled=_env_bool("CACHE_ENABLED", True),
            max_size=int(_env("CACHE_SIZE", "1000")),
            invalidate_related_keys=_env_bool("CACHE_INVALIDATE_RELATED", True),
        )
        return cls(
            cache=cache,
            database_path=_env("DATABASE_PATH", ""),
            seed_demo_data=_env_bool("SEED_DEMO_DATA", False),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            debug=_env_bool("DEBUG", False),
        )
