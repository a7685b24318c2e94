"""JSON:API document construction."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Mapping

from jsonapi_paginator.schemas.links import Link, validate_links

if TYPE_CHECKING:
    from jsonapi_paginator.pagination.base import Paginator


def _dump_links(links: Mapping[str, Any]) -> dict[str, Any]:
    validate_links(links)
    return {
        name: value.model_dump(exclude_none=True) if isinstance(value, Link) else value
        for name, value in links.items()
    }


class JSONAPIDocumentBuilder:
    """Build JSON:API v1.1 documents from serialized data."""

    def build_single(
        self,
        resource: Mapping[str, Any] | None,
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for a single resource object."""
        document: dict[str, Any] = {"data": dict(resource) if resource is not None else None}
        if included:
            document["included"] = [dict(item) for item in included]
        if links:
            document["links"] = _dump_links(links)
        if meta:
            document["meta"] = dict(meta)
        return document

    def build_collection(
        self,
        resources: Iterable[Mapping[str, Any]],
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
        paginator: Paginator | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for a collection of resources.

        When a paginator is given, its links are merged over ``links`` and its
        metadata is stored under ``meta["page"]``.
        """
        document: dict[str, Any] = {"data": [dict(item) for item in resources]}
        if included:
            document["included"] = [dict(item) for item in included]
        links = dict(links or {})
        meta = dict(meta or {})
        if paginator is not None:
            links.update(paginator.generate_pagination() or {})
            meta["page"] = paginator.get_meta()
        if links:
            document["links"] = _dump_links(links)
        if meta:
            document["meta"] = meta
        return document

    def build_error(self, errors: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API error document from error objects."""
        return {"errors": [dict(error) for error in errors]}
