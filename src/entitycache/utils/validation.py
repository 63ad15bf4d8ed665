"""Identifier validation helpers."""

import re
import secrets

from entitycache.core.exceptions import InvalidRequestError

# HTML5 email pattern.
EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9]"
    r"(?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def validate_email(email: str) -> str:
    """Return email unchanged if it is a valid address.

    Raises:
        InvalidRequestError: If the address is malformed.
    """
    if not EMAIL_PATTERN.match(email):
        raise InvalidRequestError(f'Invalid email "{email}"')
    return email


def validate_object_id(value: str) -> str:
    """Return value unchanged if it is a 24 character hex identifier.

    Raises:
        InvalidRequestError: If the identifier is malformed.
    """
    if not OBJECT_ID_PATTERN.match(value):
        raise InvalidRequestError(f'Invalid id "{value}"')
    return value


def new_object_id() -> str:
    """Generate a fresh 24 character hex identifier."""
    return secrets.token_hex(12)
