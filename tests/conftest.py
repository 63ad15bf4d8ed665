"""Pytest configuration for entitycache tests."""

from collections.abc import Callable

import pytest

from entitycache import (
    BoundedCache,
    Comment,
    DefaultKeyBuilder,
    InMemoryCommentRepository,
    InMemoryUserRepository,
    User,
)
from entitycache.core.entities.user import UserAuth, UserLocation, UserMeta
from tests.constants import (
    COMMENT_ID,
    CREATED_AT,
    EMAIL,
    OTHER_COMMENT_ID,
    OTHER_EMAIL,
    OTHER_USER_ID,
    USER_ID,
)


@pytest.fixture
def make_user() -> Callable[..., User]:
    """Factory for user snapshots."""

    def factory(
        user_id: str = USER_ID,
        email: str = EMAIL,
        firstname: str = "Ada",
        lastname: str = "Lovelace",
    ) -> User:
        return User(
            id=user_id,
            email=email,
            meta=UserMeta(firstname=firstname, lastname=lastname),
            auth=UserAuth(password="secret"),
            location=UserLocation(city="London", country="UK"),
            created_at=CREATED_AT,
        )

    return factory


@pytest.fixture
def user(make_user: Callable[..., User]) -> User:
    return make_user()


@pytest.fixture
def other_user(make_user: Callable[..., User]) -> User:
    return make_user(user_id=OTHER_USER_ID, email=OTHER_EMAIL, firstname="Bob")


@pytest.fixture
def comments() -> list[Comment]:
    return [
        Comment(id=COMMENT_ID, user_id=USER_ID, body="First!", created_at=CREATED_AT),
        Comment(
            id=OTHER_COMMENT_ID,
            user_id=OTHER_USER_ID,
            body="Nice post",
            created_at=CREATED_AT,
        ),
    ]


@pytest.fixture
def cache() -> BoundedCache:
    """A fresh cache per test."""
    return BoundedCache(maxsize=100)


@pytest.fixture
def key_builder() -> DefaultKeyBuilder:
    return DefaultKeyBuilder()


@pytest.fixture
def user_repository(user: User, other_user: User) -> InMemoryUserRepository:
    return InMemoryUserRepository([user, other_user])


@pytest.fixture
def comment_repository(comments: list[Comment]) -> InMemoryCommentRepository:
    return InMemoryCommentRepository(comments)
