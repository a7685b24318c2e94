"""JSON:API error objects."""

from typing import Any

from jsonapi_paginator.exceptions import InvalidLinksError

ERROR_TITLES: dict[type[Exception], str] = {
    InvalidLinksError: "Invalid Links",
}


class JSONAPIErrorBuilder:
    """Build JSON:API error objects from fields or exceptions."""

    def error_object(self, **members: Any) -> dict[str, Any]:
        """Return an error object holding the members that are set.

        Accepted members are status, code, title, detail, source and meta.
        """
        unknown = set(members) - {"status", "code", "title", "detail", "source", "meta"}
        if unknown:
            raise ValueError(f"Unknown error object members: {sorted(unknown)}")
        error = {name: value for name, value in members.items() if value is not None}
        if not error:
            raise ValueError("Error object must include at least one member.")
        return error

    def from_exception(self, exc: Exception, *, status: str = "500") -> dict[str, Any]:
        """Return an error object describing an exception."""
        title = next(
            (title for exc_type, title in ERROR_TITLES.items() if isinstance(exc, exc_type)),
            "Internal Server Error",
        )
        return self.error_object(
            status=status,
            code=type(exc).__name__,
            title=title,
            detail=str(exc) or None,
        )
