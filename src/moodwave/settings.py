"""Application settings loaded from environment variables."""

import functools

from pydantic_settings import BaseSettings

from moodwave.constants import (
    DEFAULT_RECOMMENDATION_LIMIT,
    DEFAULT_SESSION_COOKIE_NAME,
    DEFAULT_SESSION_MAX_AGE_SECONDS,
)
from moodwave.spotify.constants import DEFAULT_REQUEST_TIMEOUT


class AppSettings(BaseSettings):
    """Moodwave service configuration."""

    SPOTIFY_CLIENT_ID: str = ""
    SPOTIFY_CLIENT_SECRET: str = ""
    SPOTIFY_REQUEST_TIMEOUT_SECONDS: float = DEFAULT_REQUEST_TIMEOUT

    # Session cookie (Fernet-encrypted credential)
    SESSION_ENCRYPTION_KEY: str = ""
    SESSION_COOKIE_NAME: str = DEFAULT_SESSION_COOKIE_NAME
    SESSION_COOKIE_SECURE: bool = True  # Set False for local dev over HTTP
    SESSION_MAX_AGE_SECONDS: int = DEFAULT_SESSION_MAX_AGE_SECONDS

    # Recommendations
    RECOMMENDATION_LIMIT: int = DEFAULT_RECOMMENDATION_LIMIT

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = {"env_prefix": ""}


@functools.lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return cached application settings singleton."""
    return AppSettings()
