"""Use case container handed to request handlers."""

from dataclasses import dataclass

from fastapi import Request

from entitycache.core.services import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    DeleteUserUseCase,
    FetchCommentsUseCase,
    FetchUserUseCase,
    UpdateCommentUseCase,
    UpdateUserUseCase,
)


@dataclass(frozen=True)
class UseCases:
    """Every use case, wired to the same cache instance."""

    fetch_user: FetchUserUseCase
    update_user: UpdateUserUseCase
    delete_user: DeleteUserUseCase
    fetch_comments: FetchCommentsUseCase
    create_comment: CreateCommentUseCase
    update_comment: UpdateCommentUseCase
    delete_comment: DeleteCommentUseCase


def get_use_cases(request: Request) -> UseCases:
    """FastAPI dependency returning the use cases built at startup."""
    return request.app.state.use_cases
