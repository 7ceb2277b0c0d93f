"""Save-playlist endpoint."""

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from moodwave.auth.dependencies import CurrentCredential, Settings
from moodwave.playlists.schemas import SavePlaylistRequest, SavePlaylistResponse
from moodwave.playlists.service import PlaylistService
from moodwave.spotify.client import SpotifyClient
from moodwave.spotify.exceptions import SpotifyClientError

logger = logging.getLogger(__name__)


def get_playlist_service(settings: Settings) -> PlaylistService:
    """FastAPI dependency that provides a PlaylistService instance."""
    return PlaylistService(
        client_factory=lambda token: SpotifyClient(token, request_timeout=settings.SPOTIFY_REQUEST_TIMEOUT_SECONDS)
    )


Service = Annotated[PlaylistService, Depends(get_playlist_service)]


class PlaylistsRouter:
    """Class-based router for playlist persistence."""

    def __init__(self) -> None:
        self.router = APIRouter()
        self.router.add_api_route("/save-playlist", self.save_playlist, methods=["POST"], status_code=201)

    async def save_playlist(
        self,
        body: SavePlaylistRequest,
        credential: CurrentCredential,
        service: Service,
    ) -> SavePlaylistResponse:
        """Create a private playlist from the given track URIs."""
        if not body.track_uris:
            raise HTTPException(status_code=400, detail="No tracks provided to save.")

        name = body.name or f"Moodwave • {date.today().isoformat()}"
        description = body.description or f"Custom playlist generated from the {body.mood or 'mood'} preset."

        try:
            playlist_id = await service.create_playlist_with_tracks(
                credential.access_token,
                name,
                body.track_uris,
                description=description,
                public=False,
            )
        except (SpotifyClientError, ValidationError) as exc:
            logger.exception("Unable to save playlist")
            raise HTTPException(status_code=500, detail="Spotify playlist creation failed.") from exc
        return SavePlaylistResponse(playlist_id=playlist_id)


_instance = PlaylistsRouter()
router = _instance.router
