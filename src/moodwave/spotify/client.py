"""Spotify Web API async client with defensive response parsing."""

import json
import logging
from typing import Any

import httpx

from moodwave.spotify.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TIME_RANGE,
    ERROR_BODY_PREVIEW_CHARS,
    ME_URL,
    PLAYLIST_URL,
    RECOMMENDATIONS_URL,
    TOP_ARTISTS_URL,
    TOP_TRACKS_URL,
    USERS_URL,
)
from moodwave.spotify.exceptions import (
    SpotifyAPIError,
    SpotifyMalformedResponseError,
    SpotifyTransportError,
    SpotifyUnexpectedResponseError,
)
from moodwave.spotify.models import (
    RecommendationsResponse,
    SpotifyPlaylist,
    SpotifySnapshotResponse,
    SpotifyUserProfile,
    TopArtistsResponse,
    TopTracksResponse,
)

logger = logging.getLogger(__name__)


class SpotifyClient:
    """Async Spotify Web API client.

    Takes an access_token per-instance (stateless re: auth). Every call is a
    single request: there is no retry or backoff here. Callers that
    need a fresh token get one from the credential manager first.
    """

    def __init__(
        self,
        access_token: str,
        *,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        self._access_token = access_token
        self._request_timeout = request_timeout

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        """Send an authorized request and return the decoded JSON payload.

        1. Send request with Bearer token
        2. Transport failure: raise SpotifyTransportError
        3. Read the body as text and try to decode it as JSON
        4. Non-2xx with ``{"error": {"status", "message"}}``: raise SpotifyAPIError
        5. Any other non-2xx: raise SpotifyUnexpectedResponseError
        6. 2xx with an undecodable body: raise SpotifyMalformedResponseError
        7. 2xx with an empty body: return ``{}``
        """
        try:
            async with httpx.AsyncClient(timeout=self._request_timeout) as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json_body,
                    headers={"Authorization": f"Bearer {self._access_token}"},
                )
        except httpx.HTTPError as exc:
            raise SpotifyTransportError(f"{method} {url} failed: {exc}") from exc

        raw = response.text
        payload: Any = None
        decoded = False
        if raw:
            try:
                payload = json.loads(raw)
                decoded = True
            except ValueError:
                logger.warning(
                    "Unable to parse Spotify response as JSON: %s", raw[:ERROR_BODY_PREVIEW_CHARS]
                )

        if not response.is_success:
            if _is_spotify_error(payload):
                raise SpotifyAPIError(status_code=response.status_code, message=payload["error"]["message"])
            raise SpotifyUnexpectedResponseError(status_code=response.status_code, reason=response.reason_phrase)

        if raw and not decoded:
            raise SpotifyMalformedResponseError(
                status_code=response.status_code, body_preview=raw[:ERROR_BODY_PREVIEW_CHARS]
            )
        return payload if payload is not None else {}

    # -------------------------------------------------------------------
    # Personalization
    # -------------------------------------------------------------------

    async def get_top_artists(
        self,
        *,
        time_range: str = DEFAULT_TIME_RANGE,
        limit: int = 20,
    ) -> TopArtistsResponse:
        """GET /me/top/artists."""
        payload = await self._request("GET", TOP_ARTISTS_URL, params={"limit": limit, "time_range": time_range})
        return TopArtistsResponse.model_validate(payload)

    async def get_top_tracks(
        self,
        *,
        time_range: str = DEFAULT_TIME_RANGE,
        limit: int = 20,
    ) -> TopTracksResponse:
        """GET /me/top/tracks."""
        payload = await self._request("GET", TOP_TRACKS_URL, params={"limit": limit, "time_range": time_range})
        return TopTracksResponse.model_validate(payload)

    # -------------------------------------------------------------------
    # Recommendations
    # -------------------------------------------------------------------

    async def get_recommendations(self, params: dict[str, str | int | float]) -> RecommendationsResponse:
        """GET /recommendations with pre-built seed and range parameters."""
        payload = await self._request("GET", RECOMMENDATIONS_URL, params=params)
        return RecommendationsResponse.model_validate(payload)

    # -------------------------------------------------------------------
    # Profile & playlist write methods
    # -------------------------------------------------------------------

    async def get_current_user_profile(self) -> SpotifyUserProfile:
        """GET /me."""
        payload = await self._request("GET", ME_URL)
        return SpotifyUserProfile.model_validate(payload)

    async def create_playlist(
        self,
        user_id: str,
        name: str,
        *,
        description: str = "",
        public: bool = False,
    ) -> SpotifyPlaylist:
        """POST /users/{id}/playlists."""
        payload = await self._request(
            "POST",
            f"{USERS_URL}/{user_id}/playlists",
            json_body={"name": name, "description": description, "public": public},
        )
        return SpotifyPlaylist.model_validate(payload)

    async def add_tracks_to_playlist(self, playlist_id: str, uris: list[str]) -> SpotifySnapshotResponse:
        """POST /playlists/{id}/tracks."""
        payload = await self._request(
            "POST",
            f"{PLAYLIST_URL}/{playlist_id}/tracks",
            json_body={"uris": uris},
        )
        return SpotifySnapshotResponse.model_validate(payload)


def _is_spotify_error(payload: Any) -> bool:
    """True if *payload* has Spotify's documented ``{"error": {"status": int, "message": str}}`` shape."""
    if not isinstance(payload, dict):
        return False
    error = payload.get("error")
    return isinstance(error, dict) and isinstance(error.get("status"), int) and isinstance(error.get("message"), str)
