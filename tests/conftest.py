import pytest

from jsonapi_paginator.config import get_settings


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Keep JSONAPI_* settings isolated between tests."""
    monkeypatch.delenv("JSONAPI_DEFAULT_LIMIT", raising=False)
    monkeypatch.delenv("JSONAPI_LINK_STYLE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
