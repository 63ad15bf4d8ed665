"""User entity and patch value objects."""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone
from typing import Any

from entitycache.core.exceptions import ValidationFailureError

# Nested update sections and the flat patch fields each one groups.
USER_UPDATE_SECTIONS: dict[str, tuple[str, ...]] = {
    "meta": ("firstname", "lastname"),
    "auth": ("password",),
    "location": ("city", "country"),
}

UserUpdate = dict[str, dict[str, str]]


@dataclass(frozen=True)
class UserMeta:
    firstname: str | None = None
    lastname: str | None = None


@dataclass(frozen=True)
class UserAuth:
    password: str | None = None


@dataclass(frozen=True)
class UserLocation:
    city: str | None = None
    country: str | None = None


@dataclass(frozen=True)
class User:
    """User record as stored by the persistence service.

    Instances are immutable, so the cache can hand out the same snapshot
    to concurrent readers.
    """

    id: str
    email: str
    meta: UserMeta = field(default_factory=UserMeta)
    auth: UserAuth = field(default_factory=UserAuth)
    location: UserLocation = field(default_factory=UserLocation)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def apply_update(self, update: UserUpdate) -> "User":
        """Return a copy of this user with a nested update applied.

        Args:
            update: Mapping of section name ("meta", "auth", "location")
                to the fields to overwrite in that section.

        Returns:
            A new User instance.
        """
        changes: dict[str, Any] = {}
        for section, values in update.items():
            if section not in USER_UPDATE_SECTIONS:
                raise KeyError(f"Unknown user section: {section}")
            changes[section] = replace(getattr(self, section), **values)
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Public representation, credentials excluded."""
        return {
            "id": self.id,
            "email": self.email,
            "meta": {
                "firstname": self.meta.firstname,
                "lastname": self.meta.lastname,
            },
            "location": {
                "city": self.location.city,
                "country": self.location.country,
            },
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class UserPatch:
    """Flat partial update of a user.

    Fields left as None were not provided and are not written.
    """

    firstname: str | None = None
    lastname: str | None = None
    password: str | None = None
    city: str | None = None
    country: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserPatch":
        """Validate a raw payload into a UserPatch.

        Raises:
            ValidationFailureError: On unknown keys or non-string values.
        """
        allowed = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - allowed)
        if unknown:
            raise ValidationFailureError(
                f"Unrecognized key(s) in object: {', '.join(unknown)}",
                fields=unknown,
            )

        invalid = sorted(
            name for name, value in data.items()
            if value is not None and not isinstance(value, str)
        )
        if invalid:
            raise ValidationFailureError(
                f"Expected string value(s) for: {', '.join(invalid)}",
                fields=invalid,
            )

        return cls(**data)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_update(self) -> UserUpdate:
        """Map the flat patch onto the persistence service's nested shape.

        Only provided fields are included, and a section is present only
        if at least one of its fields was provided.
        """
        update: UserUpdate = {}
        for section, names in USER_UPDATE_SECTIONS.items():
            values = {
                name: getattr(self, name)
                for name in names
                if getattr(self, name) is not None
            }
            if values:
                update[section] = values
        return update
