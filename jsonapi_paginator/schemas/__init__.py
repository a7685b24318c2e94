"""Pydantic schemas for JSON:API."""

from .links import (
    FIRST_PAGE,
    LAST_PAGE,
    NEXT_PAGE,
    PREVIOUS_PAGE,
    Link,
    Links,
    Meta,
    validate_links,
)
from .resource import (
    ManyPayload,
    OnePayload,
    RelationshipManyNode,
    RelationshipOneNode,
    ResourceObject,
)

__all__ = [
    "FIRST_PAGE",
    "LAST_PAGE",
    "NEXT_PAGE",
    "PREVIOUS_PAGE",
    "Link",
    "Links",
    "ManyPayload",
    "Meta",
    "OnePayload",
    "RelationshipManyNode",
    "RelationshipOneNode",
    "ResourceObject",
    "validate_links",
]
