"""
Client configuration for the AniList GraphQL API.

Only the bearer token and the per-call timeout are configurable; the
endpoint is fixed.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ANILIST_GRAPHQL_URL = "https://graphql.anilist.co"
DEFAULT_TIMEOUT_SECONDS = 20.0
MIN_TIMEOUT_SECONDS = 1.0
MAX_TIMEOUT_SECONDS = 300.0


class AniListSettings(BaseSettings):
    """AniList client settings read from the environment or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    anilist_api_token: str | None = Field(
        default=None,
        description="OAuth bearer token sent as the Authorization header",
    )
    anilist_timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Total timeout for one request in seconds",
    )

    @field_validator("anilist_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        Validate that the request timeout is between 1 and 300 seconds.

        Raises:
            ValueError: If ``v`` falls outside that range.
        """
        if not MIN_TIMEOUT_SECONDS <= v <= MAX_TIMEOUT_SECONDS:
            raise ValueError("AniList timeout must be between 1 and 300 seconds")
        return v

    @field_validator("anilist_api_token")
    @classmethod
    def blank_token_is_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v


@lru_cache
def get_settings() -> AniListSettings:
    """Get cached AniListSettings instance populated from environment variables.

    Environment variables are automatically read by Pydantic BaseSettings:
        ANILIST_API_TOKEN (default: unset)
        ANILIST_TIMEOUT (default: 20)

    Note:
        Uses @lru_cache for singleton pattern. For testing, call
        get_settings.cache_clear() to reset the cache.
    """
    return AniListSettings()
