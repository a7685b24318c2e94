"""Settings for JSON:API pagination."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination defaults, read from JSONAPI_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="JSONAPI_", extra="ignore")

    default_limit: int = Field(default=50, ge=1)
    link_style: Literal["url", "object"] = "url"


@lru_cache
def get_settings() -> PaginationSettings:
    return PaginationSettings()
