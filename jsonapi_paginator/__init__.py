"""JSON:API documents with offset pagination links."""

from .core.document import JSONAPIDocumentBuilder
from .core.errors import JSONAPIErrorBuilder
from .exceptions import InvalidLinksError
from .pagination import OffsetPagination, Paginator
from .schemas import Link, ManyPayload, OnePayload, ResourceObject

__all__ = [
    "InvalidLinksError",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "Link",
    "ManyPayload",
    "OffsetPagination",
    "OnePayload",
    "Paginator",
    "ResourceObject",
]
