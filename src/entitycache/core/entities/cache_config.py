"""Cache configuration entity."""

from dataclasses import dataclass


@dataclass
class CacheConfig:
    """Cache configuration.

    Provides configuration options for the read cache sitting in front
    of the persistence layer.

    Related-key invalidation:
        An entity may be cached under more than one key (by id and by
        email, or by id with and without its parent id). When
        invalidate_related_keys=True, mutations evict every key the
        returned snapshot could be cached under, not only the key of the
        identifier used in the request.
    """

    enabled: bool = True
    max_size: int = 1000
    key_separator: str = ":"

    # Invalidation
    invalidate_related_keys: bool = True

    def __post_init__(self) -> None:
        """Validate the configured capacity."""
        if self.max_size < 1:
            raise ValueError(f"max_size must be positive, got {self.max_size}")
        if not self.key_separator:
            raise ValueError("key_separator must not be empty")
