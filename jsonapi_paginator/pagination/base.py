"""Paginator capability consumed by JSON:API payloads."""

from __future__ import annotations

from typing import Any

from jsonapi_paginator.schemas.links import Links


class Paginator:
    """Define the pagination API used by collection payloads."""

    def generate_pagination(self) -> Links | None:
        """Return pagination links, or None when no pagination is needed."""
        raise NotImplementedError

    def get_meta(self) -> dict[str, Any]:
        """Return pagination metadata (total, limit, offset, etc.)."""
        raise NotImplementedError
