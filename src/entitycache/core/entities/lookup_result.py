"""Lookup result entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class CacheOrigin(Enum):
    """Where a lookup result came from.

    HIT: Served from the cache, persistence was not consulted.
    MISS: Fetched from persistence (and cached if caching is enabled).
    NOT_APPLICABLE: Collection read, the cache is never consulted.
    """

    HIT = "HIT"
    MISS = "MISS"
    NOT_APPLICABLE = "NOT_APPLICABLE"


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """Value returned by a lookup use case together with its cache origin."""

    value: T
    origin: CacheOrigin

    @property
    def is_hit(self) -> bool:
        return self.origin is CacheOrigin.HIT
