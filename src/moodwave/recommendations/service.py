"""Recommendation service — mood presets and listening history to a track list."""

import logging
from collections.abc import Callable

from moodwave.constants import DEFAULT_RECOMMENDATION_LIMIT
from moodwave.moods import MoodKey, MoodPreset, lookup, resolve
from moodwave.recommendations.schemas import (
    RecommendationResult,
    SimplifiedAlbum,
    SimplifiedArtist,
    SimplifiedTrack,
)
from moodwave.recommendations.seeds import SeedBundle, build_seed_bundle, fetch_personal_seeds, select_genres
from moodwave.spotify.client import SpotifyClient
from moodwave.spotify.exceptions import SpotifyResponseError
from moodwave.spotify.models import RecommendationsResponse, SpotifyTrack

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], SpotifyClient]


def build_request_params(
    preset: MoodPreset,
    bundle: SeedBundle,
    genres: list[str],
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
) -> dict[str, str | int | float]:
    """Assemble ``/recommendations`` query parameters.

    Seed parameters are included only when non-empty and range bounds only
    when defined.
    """
    params: dict[str, str | int | float] = {"limit": limit}
    if genres:
        params["seed_genres"] = ",".join(genres)
    if bundle.artists:
        params["seed_artists"] = ",".join(bundle.artists)
    if bundle.tracks:
        params["seed_tracks"] = ",".join(bundle.tracks)
    params.update(preset.ranges.as_params())
    return params


def format_track(track: SpotifyTrack) -> SimplifiedTrack:
    """Normalize an upstream track. Missing album art becomes ``None``."""
    album = track.album
    return SimplifiedTrack(
        id=track.id,
        name=track.name,
        uri=track.uri,
        preview_url=track.preview_url,
        album=SimplifiedAlbum(
            id=album.id if album else None,
            name=album.name if album else None,
            image=album.images[0].url if album and album.images else None,
        ),
        artists=[SimplifiedArtist(id=artist.id, name=artist.name) for artist in track.artists],
        external_url=track.external_urls.get("spotify"),
    )


class RecommendationService:
    """Resolves a mood (plus optional genre override) into recommended tracks.

    Stateless: every call works on the access token it is given.
    """

    def __init__(
        self,
        client_factory: ClientFactory = SpotifyClient,
        limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    ) -> None:
        self._client_factory = client_factory
        self._limit = limit

    async def get_recommendations(
        self,
        access_token: str,
        mood_param: str | None,
        custom_genres: list[str] | None = None,
    ) -> RecommendationResult:
        """Return up to ``limit`` tracks matching the mood.

        If custom genres yield a 404 from Spotify, the recommendation request
        is retried exactly once with the mood's own genres. Any other failure,
        or a failure on that retry, propagates.

        Raises:
            SpotifyClientError: On transport failure or an unusable response.
        """
        mood: MoodKey = resolve(mood_param)
        preset = lookup(mood)
        client = self._client_factory(access_token)

        personal = await fetch_personal_seeds(client)
        bundle = build_seed_bundle(preset, personal)

        response = await self._request(client, preset, bundle, custom_genres)

        logger.info(
            "Resolved %d tracks for mood %s (personal seeds degraded=%s)",
            len(response.tracks),
            mood,
            personal.degraded,
            extra={"mood": mood},
        )
        return RecommendationResult(mood=mood, tracks=[format_track(track) for track in response.tracks])

    async def _request(
        self,
        client: SpotifyClient,
        preset: MoodPreset,
        bundle: SeedBundle,
        custom_genres: list[str] | None,
        *,
        genres_defaulted: bool = False,
    ) -> RecommendationsResponse:
        """Request recommendations, retrying once with the preset genres on a 404.

        ``genres_defaulted`` marks the retry; it is never retried again.
        """
        genres = select_genres(bundle, custom_genres)
        try:
            return await client.get_recommendations(build_request_params(preset, bundle, genres, self._limit))
        except SpotifyResponseError as exc:
            if genres_defaulted or exc.status_code != 404 or not custom_genres:
                raise
            logger.warning(
                "Custom genres produced no results, falling back to mood preset: %s",
                ",".join(custom_genres),
                extra={"mood": preset.key},
            )
            return await self._request(client, preset, bundle, None, genres_defaulted=True)
