"""Pydantic schemas for JSON:API v1.1 resources and payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .links import Links, Meta

if TYPE_CHECKING:
    from jsonapi_paginator.pagination.base import Paginator


class ResourceObject(BaseModel):
    """Resource object with attributes and relationships."""

    type: str
    id: Optional[str] = None
    attributes: Optional[Dict[str, Any]] = None
    relationships: Optional[Dict[str, Any]] = None
    links: Optional[Links] = None
    meta: Optional[Meta] = None


class RelationshipOneNode(BaseModel):
    """Has-one relationship: a single resource or null."""

    data: Optional[ResourceObject] = None
    links: Optional[Links] = None
    meta: Optional[Meta] = None


class RelationshipManyNode(BaseModel):
    """Has-many relationship."""

    data: List[ResourceObject] = Field(default_factory=list)
    links: Optional[Links] = None
    meta: Optional[Meta] = None


class OnePayload(BaseModel):
    """Top-level document whose data is a single resource."""

    data: Optional[ResourceObject] = None
    included: Optional[List[ResourceObject]] = None
    links: Optional[Links] = None
    meta: Optional[Meta] = None

    def clear_included(self) -> None:
        self.included = []

    def add_pagination(self, paginator: Paginator) -> None:
        """Single resources are never paginated."""


class ManyPayload(BaseModel):
    """Top-level document whose data is a list of resources."""

    data: List[ResourceObject] = Field(default_factory=list)
    included: Optional[List[ResourceObject]] = None
    links: Optional[Links] = None
    meta: Optional[Meta] = None

    def clear_included(self) -> None:
        self.included = []

    def add_pagination(self, paginator: Paginator) -> None:
        """Merge the paginator's links into the document links."""
        pagination = paginator.generate_pagination()
        if pagination is None:
            return
        self.links = {**(self.links or {}), **pagination}
