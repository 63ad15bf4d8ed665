"""Thin request handlers for users and comments.

Handlers only translate between HTTP and the use cases: query strings
become lookup queries, results become {"data", "message"} bodies, and
reads report their cache origin in the X-Cache-Status header.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query, Response

from entitycache.adapters.fastapi.dependencies import UseCases, get_use_cases
from entitycache.adapters.fastapi.schemas import (
    CreateCommentBody,
    UpdateCommentBody,
    UpdateUserBody,
    payload,
)
from entitycache.core.entities.lookup_query import (
    parse_lookup_query,
    parse_target_query,
)
from entitycache.core.entities.lookup_result import LookupResult

CACHE_STATUS_HEADER = "X-Cache-Status"

users_router = APIRouter(prefix="/api/users", tags=["users"])
comments_router = APIRouter(prefix="/api/comments", tags=["comments"])


def _serialize(value: Any) -> Any:
    if isinstance(value, list):
        return [item.to_dict() for item in value]
    return value.to_dict()


def _fetch_response(response: Response, result: LookupResult[Any]) -> dict[str, Any]:
    response.headers[CACHE_STATUS_HEADER] = "HIT" if result.is_hit else "MISS"
    message = "Fetch success (cached)." if result.is_hit else "Fetch success."
    return {"data": _serialize(result.value), "message": message}


@users_router.get("")
async def get_users(
    response: Response,
    id: str | None = None,
    email: str | None = None,
    use_cases: UseCases = Depends(get_use_cases),
) -> dict[str, Any]:
    result = await use_cases.fetch_user.execute(parse_lookup_query(id=id, email=email))
    return _fetch_response(response, result)


@users_router.patch("")
async def update_user(
    body: UpdateUserBody,
    id: str | None = None,
    email: str | None = None,
    use_cases: UseCases = Depends(get_use_cases),
) -> dict[str, Any]:
    query = parse_target_query(id=id, email=email)
    user = await use_cases.update_user.execute(query, payload(body))
    return {"data": user.to_dict(), "message": "Update success."}


@users_router.delete("")
async def delete_user(
    id: str | None = None,
    email: str | None = None,
    use_cases: UseCases = Depends(get_use_cases),
) -> dict[str, Any]:
    user = await use_cases.delete_user.execute(parse_target_query(id=id, email=email))
    return {"data": user.to_dict(), "message": "Deletion success."}


@comments_router.get("")
async def get_comments(
    response: Response,
    id: str | None = None,
    user_id: str | None = Query(default=None, alias="userId"),
    use_cases: UseCases = Depends(get_use_cases),
) -> dict[str, Any]:
    query = parse_lookup_query(id=id, parent_id=user_id)
    result = await use_cases.fetch_comments.execute(query)
    return _fetch_response(response, result)


@comments_router.post("", status_code=201)
async def create_comment(
    body: CreateCommentBody,
    use_cases: UseCases = Depends(get_use_cases),
) -> dict[str, Any]:
    comment = await use_cases.create_comment.execute(payload(body))
    return {"data": comment.to_dict(), "message": "Post success."}


@comments_router.patch("")
async def update_comment(
    body: UpdateCommentBody,
    id: str | None = None,
    user_id: str | None = Query(default=None, alias="userId"),
    use_cases: UseCases = Depends(get_use_cases),
) -> dict[str, Any]:
    query = parse_target_query(id=id, parent_id=user_id)
    comment = await use_cases.update_comment.execute(query, payload(body))
    return {"data": comment.to_dict(), "message": "Update success."}


@comments_router.delete("")
async def delete_comment(
    id: str | None = None,
    user_id: str | None = Query(default=None, alias="userId"),
    use_cases: UseCases = Depends(get_use_cases),
) -> dict[str, Any]:
    comment = await use_cases.delete_comment.execute(
        parse_target_query(id=id, parent_id=user_id)
    )
    return {"data": comment.to_dict(), "message": "Delete success."}
