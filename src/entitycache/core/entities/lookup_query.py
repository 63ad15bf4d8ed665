"""Lookup query value objects.

A lookup query addresses either a single entity, through exactly one
identifier field, or a whole collection:

    ById(id, parent_id=None)   single entity by primary id
    ByEmail(email)             single entity by secondary unique field
    ListAll(parent_id=None)    collection, optionally scoped to a parent

Raw request parameters are turned into a query with parse_lookup_query
(reads) or parse_target_query (mutations).
"""

from dataclasses import dataclass

from entitycache.core.exceptions import InvalidRequestError


@dataclass(frozen=True)
class ById:
    """Lookup by primary id, optionally scoped to a parent entity."""

    id: str
    parent_id: str | None = None


@dataclass(frozen=True)
class ByEmail:
    """Lookup by email address."""

    email: str


@dataclass(frozen=True)
class ListAll:
    """Collection lookup, optionally restricted to one parent entity."""

    parent_id: str | None = None


LookupQuery = ById | ByEmail | ListAll


def parse_lookup_query(
    id: str | None = None,
    email: str | None = None,
    parent_id: str | None = None,
) -> LookupQuery:
    """Build a read query from raw request parameters.

    When both id and email are given, id takes precedence. Empty strings
    count as absent.

    Args:
        id: Primary id of the entity.
        email: Email of the entity.
        parent_id: Optional association identifier (e.g. comment author).

    Returns:
        The matching LookupQuery variant.
    """
    if id:
        return ById(id=id, parent_id=parent_id or None)
    if email:
        return ByEmail(email=email)
    return ListAll(parent_id=parent_id or None)


def parse_target_query(
    id: str | None = None,
    email: str | None = None,
    parent_id: str | None = None,
) -> ById | ByEmail:
    """Build a single-entity query for a mutation.

    Exactly one identifier must be supplied.

    Raises:
        InvalidRequestError: If no identifier or both identifiers are given.
    """
    if id and email:
        raise InvalidRequestError("Ambiguous query: provide either id or email.")
    if id:
        return ById(id=id, parent_id=parent_id or None)
    if email:
        return ByEmail(email=email)
    raise InvalidRequestError("No query is provided.")
