"""JSON:API links and meta objects.

See https://jsonapi.org/format/#document-links
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

from jsonapi_paginator.exceptions import InvalidLinksError

FIRST_PAGE = "first"
PREVIOUS_PAGE = "prev"
NEXT_PAGE = "next"
LAST_PAGE = "last"


class Link(BaseModel):
    """Link object: href plus optional meta."""

    href: str
    meta: Optional[Dict[str, Any]] = None


Meta = Dict[str, Any]
Links = Dict[str, Union[str, Link]]


def validate_links(links: Mapping[str, Any]) -> None:
    """Check that every member is a URL string or a link object."""
    for name, value in links.items():
        if isinstance(value, (str, Link)):
            continue
        if isinstance(value, Mapping) and isinstance(value.get("href"), str):
            continue
        raise InvalidLinksError(
            f"The {name} member of the links object was not a string or link object"
        )
