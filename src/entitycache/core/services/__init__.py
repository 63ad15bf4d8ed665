"""Domain services (use cases) for entitycache."""

from entitycache.core.services.comment_use_cases import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    FetchCommentsUseCase,
    UpdateCommentUseCase,
)
from entitycache.core.services.lookup import EntityLookupUseCase
from entitycache.core.services.mutation import EntityMutationUseCase
from entitycache.core.services.user_use_cases import (
    DeleteUserUseCase,
    FetchUserUseCase,
    UpdateUserUseCase,
)

__all__ = [
    "EntityLookupUseCase",
    "EntityMutationUseCase",
    # Users
    "FetchUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    # Comments
    "FetchCommentsUseCase",
    "CreateCommentUseCase",
    "UpdateCommentUseCase",
    "DeleteCommentUseCase",
]
