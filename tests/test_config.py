import pytest
from pydantic import ValidationError

from jsonapi_paginator.config import PaginationSettings, get_settings


def test_defaults():
    settings = get_settings()

    assert settings.default_limit == 50
    assert settings.link_style == "url"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("JSONAPI_DEFAULT_LIMIT", "25")
    monkeypatch.setenv("JSONAPI_LINK_STYLE", "object")

    settings = PaginationSettings()

    assert settings.default_limit == 25
    assert settings.link_style == "object"


def test_settings_are_cached():
    assert get_settings() is get_settings()


@pytest.mark.parametrize(("name", "value"), [("JSONAPI_DEFAULT_LIMIT", "0"), ("JSONAPI_LINK_STYLE", "html")])
def test_invalid_settings(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        PaginationSettings()
