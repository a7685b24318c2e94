"""Offset pagination links for JSON:API collections."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Literal, Sequence

from pydantic import BaseModel, Field

from jsonapi_paginator.config import PaginationSettings, get_settings
from jsonapi_paginator.schemas.links import (
    FIRST_PAGE,
    LAST_PAGE,
    NEXT_PAGE,
    PREVIOUS_PAGE,
    Link,
    Links,
)

from .base import Paginator
from .query import append_param, get_page_param, has_param, replace_param

if TYPE_CHECKING:
    from starlette.requests import Request

logger = logging.getLogger(__name__)

LIMIT_PARAM = "page[limit]"
OFFSET_PARAM = "page[offset]"


class OffsetPagination(BaseModel, Paginator):
    """Build first/prev/next/last links for page[offset]/page[limit] pagination.

    Links are derived from ``url`` by rewriting only the ``page[limit]`` and
    ``page[offset]`` values; every other query parameter keeps its text and
    position. ``limit`` must be at least 1 whenever ``total`` is non-zero,
    otherwise computing the last page divides by zero.
    """

    url: str
    limit: int = Field(ge=0)
    total: int = Field(ge=0)
    link_style: Literal["url", "object"] = "url"

    @classmethod
    def from_request(
        cls,
        request: Request,
        total: int,
        *,
        settings: PaginationSettings | None = None,
    ) -> OffsetPagination:
        """Create a paginator for the URL of an incoming request.

        Percent-encoded brackets in the query (``page%5Boffset%5D``) are
        decoded so the page parameters are found by their literal names.
        """
        settings = settings or get_settings()
        query = re.sub("%5b", "[", request.url.query, flags=re.IGNORECASE)
        query = re.sub("%5d", "]", query, flags=re.IGNORECASE)
        return cls(
            url=str(request.url.replace(query=query)),
            limit=settings.default_limit,
            total=total,
            link_style=settings.link_style,
        )

    def working_url(self) -> str:
        """Return the URL with both page parameters guaranteed to be present."""
        url = self.url
        if not has_param(url, LIMIT_PARAM):
            url = append_param(url, f"{LIMIT_PARAM}={self.limit}")
        if not has_param(url, OFFSET_PARAM):
            url = append_param(url, f"{OFFSET_PARAM}=0")
        return url

    def window(self) -> tuple[int, int]:
        """Return the effective (limit, offset) for the current request."""
        url = self.working_url()
        limit = min(get_page_param("limit", url), self.limit) or self.limit
        offset = max(get_page_param("offset", url), 0)
        return limit, offset

    def generate_pagination(self) -> Links | None:
        """Return first/prev/next/last links, or None if one page holds everything."""
        if self.total < self.limit:
            logger.debug(
                "No pagination needed: total=%s below limit=%s", self.total, self.limit
            )
            return None

        url = self.working_url()
        limit, offset = self.window()
        links: Links = {}

        if offset > 0:
            links[FIRST_PAGE] = self._link(url, limit, 0)
        if offset > limit:
            links[PREVIOUS_PAGE] = self._link(url, limit, offset - limit)
        # No next link within one page of the end; last covers it.
        if offset + limit < self.total - limit:
            links[NEXT_PAGE] = self._link(url, limit, offset + limit)
        if offset + limit < self.total:
            links[LAST_PAGE] = self._link(url, limit, self._last_offset(limit, offset))

        logger.debug(
            "Generated pagination links %s (limit=%s, offset=%s, total=%s)",
            sorted(links),
            limit,
            offset,
            self.total,
        )
        return links

    def paginate(self, items: Sequence[Any]) -> list[Any]:
        """Return the slice of items inside the current window."""
        limit, offset = self.window()
        return list(items[offset : offset + limit])

    def get_meta(self) -> dict[str, Any]:
        """Return pagination metadata with total, limit, and offset."""
        limit, offset = self.window()
        return {"total": self.total, "limit": limit, "offset": offset}

    def _last_offset(self, limit: int, offset: int) -> int:
        pages = -(-self.total // limit)
        # Keep the caller's alignment within a page.
        last_offset = (pages - 1) * limit + offset % limit
        if last_offset > self.total:
            last_offset -= limit
        return last_offset

    def _link(self, url: str, limit: int, offset: int) -> str | Link:
        href = replace_param(url, LIMIT_PARAM, limit)
        href = replace_param(href, OFFSET_PARAM, offset)
        if self.link_style == "object":
            return Link(href=href)
        return href
