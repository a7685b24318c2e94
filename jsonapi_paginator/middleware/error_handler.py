"""JSON:API error handling middleware."""

import logging
from typing import Any

from jsonapi_paginator.core.document import JSONAPIDocumentBuilder
from jsonapi_paginator.core.errors import JSONAPIErrorBuilder
from jsonapi_paginator.responses import JSONAPIResponse

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert exceptions into JSON:API error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.error_builder = JSONAPIErrorBuilder()
        self.document_builder = JSONAPIDocumentBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return
        try:
            await self.app(scope, receive, send)
        except Exception as exc:  # noqa: BLE001 - last-resort handler
            logger.exception("Unhandled error while serving %s", scope.get("path"))
            error = self.error_builder.from_exception(exc)
            response = JSONAPIResponse(
                self.document_builder.build_error([error]),
                status_code=500,
            )
            await response(scope, receive, send)
