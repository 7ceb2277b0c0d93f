"""Spotify API client and models."""

from moodwave.spotify.client import SpotifyClient
from moodwave.spotify.exceptions import (
    SpotifyAPIError,
    SpotifyClientError,
    SpotifyMalformedResponseError,
    SpotifyResponseError,
    SpotifyTransportError,
    SpotifyUnexpectedResponseError,
)

__all__ = [
    "SpotifyClient",
    "SpotifyAPIError",
    "SpotifyClientError",
    "SpotifyMalformedResponseError",
    "SpotifyResponseError",
    "SpotifyTransportError",
    "SpotifyUnexpectedResponseError",
]
