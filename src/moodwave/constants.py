"""Centralized constants for the Moodwave service."""

import enum
from dataclasses import dataclass

from moodwave.spotify.constants import SPOTIFY_ACCOUNTS_BASE

# --- Service identity ---


class ServiceName(enum.StrEnum):
    """Service names used for logging and identification."""

    API = "moodwave"


# --- Application metadata ---

APP_TITLE = "Moodwave"
APP_DESCRIPTION = "Mood-filtered Spotify recommendations and playlist saving"
APP_VERSION = "0.1.0"


# --- Route configuration ---


@dataclass(frozen=True, slots=True)
class _Route:
    """A route prefix paired with its OpenAPI tag."""

    prefix: str
    tag: str


class Routes:
    """API route prefixes and tags."""

    SESSION = _Route("/api", "session")
    RECOMMENDATIONS = _Route("/api", "recommendations")
    PLAYLISTS = _Route("/api", "playlists")
    HEALTH = "/healthz"


# --- Spotify OAuth ---

SPOTIFY_LOGOUT_URL = f"{SPOTIFY_ACCOUNTS_BASE}/en/logout"

# Default configuration values
DEFAULT_SESSION_COOKIE_NAME = "moodwave_session"
DEFAULT_SESSION_MAX_AGE_SECONDS = 30 * 24 * 3600  # 30 days
DEFAULT_RECOMMENDATION_LIMIT = 12
DEFAULT_PLAYLIST_DESCRIPTION = "Generated with Moodwave"
