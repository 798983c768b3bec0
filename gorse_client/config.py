"""Client configuration — environment-driven settings via pydantic-settings.

Variables are read with the ``GORSE_`` prefix, from the process environment
or a ``.env`` file:

    GORSE_ENDPOINT   base URL of the Gorse server (required)
    GORSE_API_KEY    value sent in the ``X-API-Key`` header (required)
    GORSE_TIMEOUT    per-request timeout in seconds, passed to httpx
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TIMEOUT = 30.0


class GorseSettings(BaseSettings):
    """Connection settings for a Gorse server."""

    model_config = SettingsConfigDict(
        env_prefix="GORSE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    endpoint: str
    api_key: str
    timeout: float | None = DEFAULT_TIMEOUT

    @field_validator("endpoint")
    @classmethod
    def require_scheme(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("endpoint must be an http:// or https:// URL")
        return v


@lru_cache
def get_settings() -> GorseSettings:
    return GorseSettings()
