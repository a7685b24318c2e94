"""Pagination for JSON:API collections."""

from .base import Paginator
from .offset import OffsetPagination

__all__ = ["OffsetPagination", "Paginator"]
