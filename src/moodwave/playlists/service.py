"""Persists a generated track list as a playlist on the user's account."""

import logging
from collections.abc import Callable

from moodwave.constants import DEFAULT_PLAYLIST_DESCRIPTION
from moodwave.spotify.client import SpotifyClient

logger = logging.getLogger(__name__)

# Spotify accepts at most 100 URIs per add-items request
MAX_URIS_PER_REQUEST = 100


class PlaylistService:
    """Creates playlists under the current user and fills them with tracks."""

    def __init__(self, client_factory: Callable[[str], SpotifyClient] = SpotifyClient) -> None:
        self._client_factory = client_factory

    async def create_playlist_with_tracks(
        self,
        access_token: str,
        name: str,
        track_uris: list[str],
        *,
        description: str | None = None,
        public: bool = False,
    ) -> str:
        """Create a playlist named *name* holding *track_uris*. Returns the playlist ID.

        Raises:
            SpotifyClientError: If any of the profile, create, or add calls fail.
        """
        client = self._client_factory(access_token)
        profile = await client.get_current_user_profile()
        playlist = await client.create_playlist(
            profile.id,
            name,
            description=description or DEFAULT_PLAYLIST_DESCRIPTION,
            public=public,
        )

        for start in range(0, len(track_uris), MAX_URIS_PER_REQUEST):
            await client.add_tracks_to_playlist(playlist.id, track_uris[start : start + MAX_URIS_PER_REQUEST])

        logger.info(
            "Created playlist %s with %d tracks", playlist.id, len(track_uris), extra={"user_id": profile.id}
        )
        return playlist.id
