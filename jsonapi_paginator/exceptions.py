"""Exceptions raised by jsonapi_paginator."""


class InvalidLinksError(ValueError):
    """Raised when a links object holds something other than a URL or link object."""
