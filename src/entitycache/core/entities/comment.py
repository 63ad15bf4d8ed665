"""Comment entity and payload value objects."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from entitycache.core.exceptions import ValidationFailureError


@dataclass(frozen=True)
class Comment:
    """Comment record, owned by a user through user_id."""

    id: str
    user_id: str
    body: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "body": self.body,
            "created_at": self.created_at.isoformat(),
        }


def _require_body(data: Mapping[str, Any], allowed: set[str]) -> str:
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ValidationFailureError(
            f"Unrecognized key(s) in object: {', '.join(unknown)}",
            fields=unknown,
        )

    body = data.get("body")
    if not isinstance(body, str) or not body.strip():
        raise ValidationFailureError("body must be a non-empty string", fields=["body"])
    return body


@dataclass(frozen=True)
class NewComment:
    """Payload for creating a comment."""

    user_id: str
    body: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NewComment":
        """Validate a raw creation payload.

        Raises:
            ValidationFailureError: On unknown keys, a missing user_id or
                an empty body.
        """
        body = _require_body(data, {"user_id", "body"})
        user_id = data.get("user_id")
        if not isinstance(user_id, str) or not user_id:
            raise ValidationFailureError("user_id is required", fields=["user_id"])
        return cls(user_id=user_id, body=body)


@dataclass(frozen=True)
class CommentPatch:
    """Partial update of a comment. Only the body is editable."""

    body: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommentPatch":
        return cls(body=_require_body(data, {"body"}))

    def to_update(self) -> dict[str, str]:
        return {"body": self.body}
