"""Integration tests for the FastAPI application."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from entitycache import (
    CacheConfig,
    InMemoryCommentRepository,
    InMemoryUserRepository,
)
from entitycache.app import create_app
from entitycache.config import Settings
from tests.constants import (
    COMMENT_ID,
    EMAIL,
    MISSING_ID,
    OTHER_COMMENT_ID,
    OTHER_USER_ID,
    USER_ID,
)


@pytest.fixture
def client(
    user_repository: InMemoryUserRepository,
    comment_repository: InMemoryCommentRepository,
) -> Iterator[TestClient]:
    app = create_app(
        Settings(cache=CacheConfig(max_size=10)),
        user_repository=user_repository,
        comment_repository=comment_repository,
    )
    with TestClient(app) as test_client:
        yield test_client


class TestUserRoutes:
    """Tests for /api/users."""

    def test_get_user_miss_then_hit(self, client: TestClient) -> None:
        first = client.get("/api/users", params={"id": USER_ID})
        second = client.get("/api/users", params={"id": USER_ID})

        assert first.status_code == 200
        assert first.headers["X-Cache-Status"] == "MISS"
        assert first.json()["message"] == "Fetch success."
        assert first.json()["data"]["email"] == EMAIL
        assert "auth" not in first.json()["data"]

        assert second.status_code == 200
        assert second.headers["X-Cache-Status"] == "HIT"
        assert second.json()["message"] == "Fetch success (cached)."
        assert second.json()["data"] == first.json()["data"]

    def test_get_user_by_email(self, client: TestClient) -> None:
        response = client.get("/api/users", params={"email": EMAIL})

        assert response.status_code == 200
        assert response.json()["data"]["id"] == USER_ID

    def test_list_users(self, client: TestClient) -> None:
        response = client.get("/api/users")

        assert response.status_code == 200
        assert response.headers["X-Cache-Status"] == "MISS"
        assert {u["id"] for u in response.json()["data"]} == {USER_ID, OTHER_USER_ID}

    def test_invalid_id(self, client: TestClient) -> None:
        response = client.get("/api/users", params={"id": "nope"})

        assert response.status_code == 400
        assert "nope" in response.json()["message"]

    def test_unknown_user(self, client: TestClient) -> None:
        response = client.get("/api/users", params={"id": MISSING_ID})

        assert response.status_code == 404
        assert response.json()["message"] == f'User with id "{MISSING_ID}" does not exist.'

    def test_patch_then_get_sees_new_value(self, client: TestClient) -> None:
        client.get("/api/users", params={"id": USER_ID})

        patched = client.patch(
            "/api/users", params={"id": USER_ID}, json={"firstname": "X"}
        )
        assert patched.status_code == 200
        assert patched.json()["message"] == "Update success."
        assert patched.json()["data"]["meta"]["firstname"] == "X"

        fetched = client.get("/api/users", params={"id": USER_ID})
        assert fetched.headers["X-Cache-Status"] == "MISS"
        assert fetched.json()["data"]["meta"]["firstname"] == "X"

    def test_patch_by_email_evicts_id_entry(self, client: TestClient) -> None:
        client.get("/api/users", params={"id": USER_ID})

        client.patch("/api/users", params={"email": EMAIL}, json={"city": "Paris"})

        fetched = client.get("/api/users", params={"id": USER_ID})
        assert fetched.headers["X-Cache-Status"] == "MISS"
        assert fetched.json()["data"]["location"]["city"] == "Paris"

    def test_patch_requires_single_identifier(self, client: TestClient) -> None:
        ambiguous = client.patch(
            "/api/users",
            params={"id": USER_ID, "email": EMAIL},
            json={"firstname": "X"},
        )
        missing = client.patch("/api/users", json={"firstname": "X"})

        assert ambiguous.status_code == 400
        assert missing.status_code == 400
        assert missing.json()["message"] == "No query is provided."

    def test_patch_with_empty_body(self, client: TestClient) -> None:
        response = client.patch("/api/users", params={"id": USER_ID}, json={})

        assert response.status_code == 422

    def test_patch_with_unknown_field(self, client: TestClient) -> None:
        response = client.patch(
            "/api/users", params={"id": USER_ID}, json={"email": "x@y.com"}
        )

        assert response.status_code == 422

    def test_patch_unknown_user(self, client: TestClient) -> None:
        response = client.patch(
            "/api/users", params={"id": MISSING_ID}, json={"firstname": "X"}
        )

        assert response.status_code == 404

    def test_comment_id_is_not_a_user(self, client: TestClient) -> None:
        comment = client.get("/api/comments", params={"id": COMMENT_ID})
        assert comment.status_code == 200

        response = client.get("/api/users", params={"id": COMMENT_ID})

        assert response.status_code == 404
        assert "X-Cache-Status" not in response.headers

    def test_delete_then_get(self, client: TestClient) -> None:
        client.get("/api/users", params={"email": EMAIL})

        deleted = client.delete("/api/users", params={"id": USER_ID})
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Deletion success."

        assert client.get("/api/users", params={"id": USER_ID}).status_code == 404
        assert client.get("/api/users", params={"email": EMAIL}).status_code == 404


class TestCommentRoutes:
    """Tests for /api/comments."""

    def test_get_comment_scoped_to_user(self, client: TestClient) -> None:
        params = {"id": COMMENT_ID, "userId": USER_ID}

        first = client.get("/api/comments", params=params)
        second = client.get("/api/comments", params=params)

        assert first.status_code == 200
        assert first.headers["X-Cache-Status"] == "MISS"
        assert second.headers["X-Cache-Status"] == "HIT"
        assert second.json()["data"]["body"] == "First!"

    def test_comment_of_other_user(self, client: TestClient) -> None:
        response = client.get(
            "/api/comments", params={"id": OTHER_COMMENT_ID, "userId": USER_ID}
        )

        assert response.status_code == 404

    def test_list_comments_by_user(self, client: TestClient) -> None:
        response = client.get("/api/comments", params={"userId": OTHER_USER_ID})

        assert response.status_code == 200
        assert [c["id"] for c in response.json()["data"]] == [OTHER_COMMENT_ID]

    def test_post_comment(self, client: TestClient) -> None:
        response = client.post(
            "/api/comments", json={"user_id": USER_ID, "body": "Hello"}
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Post success."
        comment_id = response.json()["data"]["id"]

        fetched = client.get("/api/comments", params={"id": comment_id})
        assert fetched.json()["data"]["body"] == "Hello"

    def test_post_comment_for_unknown_user(self, client: TestClient) -> None:
        response = client.post(
            "/api/comments", json={"user_id": MISSING_ID, "body": "Hello"}
        )

        assert response.status_code == 404

    def test_post_comment_with_blank_body(self, client: TestClient) -> None:
        response = client.post("/api/comments", json={"user_id": USER_ID, "body": " "})

        assert response.status_code == 422
        assert response.json()["fields"] == ["body"]

    def test_patch_comment(self, client: TestClient) -> None:
        params = {"id": COMMENT_ID, "userId": USER_ID}
        client.get("/api/comments", params=params)

        patched = client.patch("/api/comments", params=params, json={"body": "Edited"})
        assert patched.status_code == 200
        assert patched.json()["message"] == "Update success."

        fetched = client.get("/api/comments", params=params)
        assert fetched.headers["X-Cache-Status"] == "MISS"
        assert fetched.json()["data"]["body"] == "Edited"

    def test_delete_comment(self, client: TestClient) -> None:
        deleted = client.delete("/api/comments", params={"id": COMMENT_ID})

        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Delete success."
        assert client.get("/api/comments", params={"id": COMMENT_ID}).status_code == 404


class TestServiceRoutes:
    """Tests for the health and cache statistics endpoints."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "cache_enabled": True}

    def test_cache_stats(self, client: TestClient) -> None:
        client.get("/api/users", params={"id": USER_ID})
        client.get("/api/users", params={"id": USER_ID})

        response = client.get("/cache/stats")

        assert response.status_code == 200
        stats = response.json()["stats"]
        assert stats["users"]["hits"] == 1
        assert stats["users"]["misses"] == 1
        assert stats["users"]["size"] == 1
        assert stats["users"]["maxsize"] == 10
        assert stats["comments"]["size"] == 0
        assert response.json()["config"]["max_size"] == 10

    def test_seeded_sqlite_app(self, tmp_path) -> None:
        settings = Settings(
            database_path=str(tmp_path / "app.db"),
            seed_demo_data=True,
        )

        with TestClient(create_app(settings)) as client:
            response = client.get("/api/users", params={"email": "alice@example.com"})

        assert response.status_code == 200
        assert response.json()["data"]["meta"]["firstname"] == "Alice"
