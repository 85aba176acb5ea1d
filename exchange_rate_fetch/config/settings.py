"""
Settings - Pydantic-based Configuration Management

Environment-driven configuration for the exchange rate client: the
exchangerate.host access key, the API base URL, the HTTP timeout and the cache
sweep interval. Values are read from the process environment and an optional
``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.errors import InvalidCodeError
from ..core.validators import validate_code

DEFAULT_BASE_URL = "https://api.exchangerate.host"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- API ---
    access_key: str = Field(default="", alias="EXCHANGERATE_ACCESS_KEY")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="EXCHANGERATE_BASE_URL")
    default_base: str = Field(default="EUR", alias="EXCHANGERATE_DEFAULT_BASE")

    # --- HTTP ---
    http_timeout_seconds: float = Field(default=10, alias="EXCHANGERATE_HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Cache ---
    cache_sweep_seconds: float = Field(default=300, alias="EXCHANGERATE_CACHE_SWEEP_SECONDS", ge=1)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("default_base")
    @classmethod
    def validate_default_base(cls, v: str) -> str:
        """Validate the default base currency code."""
        try:
            validate_code(v)
        except InvalidCodeError as exc:
            raise ValueError(str(exc)) from exc
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once on first use."""

    return Settings()
