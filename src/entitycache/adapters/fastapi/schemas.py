"""Request body schemas for the HTTP API."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class UpdateUserBody(BaseModel):
    """Flat partial user update. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")

    firstname: str | None = None
    lastname: str | None = None
    password: str | None = None
    city: str | None = None
    country: str | None = None


class CreateCommentBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    user_id: str
    body: str


class UpdateCommentBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    body: str


def payload(body: BaseModel) -> dict[str, Any]:
    """Only the fields the client actually sent."""
    return body.model_dump(exclude_unset=True)
