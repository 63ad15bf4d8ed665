"""Mapping of domain errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from entitycache.core.exceptions import (
    EntityCacheError,
    InvalidRequestError,
    NotFoundError,
    UpstreamError,
    ValidationFailureError,
)

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[EntityCacheError], int] = {
    InvalidRequestError: 400,
    NotFoundError: 404,
    ValidationFailureError: 422,
    UpstreamError: 502,
}


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain error as {"message": ...}."""
    status_code = 500
    for error_type, code in STATUS_CODES.items():
        if isinstance(exc, error_type):
            status_code = code
            break

    if isinstance(exc, UpstreamError):
        logger.error("Upstream failure on %s %s: %s", request.method, request.url.path, exc)

    content: dict[str, object] = {"message": str(exc)}
    if isinstance(exc, ValidationFailureError) and exc.fields:
        content["fields"] = exc.fields
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """Install handle_domain_error for every domain error class."""
    for error_type in STATUS_CODES:
        app.add_exception_handler(error_type, handle_domain_error)
    app.add_exception_handler(EntityCacheError, handle_domain_error)
