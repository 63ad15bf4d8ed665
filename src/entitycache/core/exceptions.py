"""Domain exceptions for entitycache."""


class EntityCacheError(Exception):
    """Base class for all errors raised by entitycache."""

    pass


class InvalidRequestError(EntityCacheError):
    """Raised when a lookup query is malformed or ambiguous."""

    pass


class ValidationFailureError(EntityCacheError):
    """Raised when a payload fails shape or field validation."""

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class NotFoundError(EntityCacheError):
    """Raised when no entity exists for the given identifier."""

    def __init__(self, message: str = "Entity not found.") -> None:
        super().__init__(message)


class UpstreamError(EntityCacheError):
    """Raised when the persistence service fails."""

    pass
