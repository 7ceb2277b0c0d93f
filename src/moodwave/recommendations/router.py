"""Mood catalog, genre seed and recommendation endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from moodwave.auth.dependencies import CurrentCredential, Settings
from moodwave.moods import MOOD_LIST
from moodwave.recommendations.schemas import GenreSeedsResponse, MoodSummary, RecommendationResult
from moodwave.recommendations.service import RecommendationService
from moodwave.spotify.client import SpotifyClient
from moodwave.spotify.exceptions import SpotifyClientError
from moodwave.spotify.genres import get_available_genre_seeds

logger = logging.getLogger(__name__)


def get_recommendation_service(settings: Settings) -> RecommendationService:
    """FastAPI dependency that provides a RecommendationService instance."""
    return RecommendationService(
        client_factory=lambda token: SpotifyClient(token, request_timeout=settings.SPOTIFY_REQUEST_TIMEOUT_SECONDS),
        limit=settings.RECOMMENDATION_LIMIT,
    )


Service = Annotated[RecommendationService, Depends(get_recommendation_service)]


class RecommendationsRouter:
    """Class-based router for mood-driven recommendation endpoints."""

    def __init__(self) -> None:
        self.router = APIRouter()
        self.router.add_api_route("/moods", self.moods, methods=["GET"])
        self.router.add_api_route("/genres", self.genres, methods=["GET"])
        self.router.add_api_route("/mood-playlist", self.mood_playlist, methods=["GET"])

    async def moods(self) -> list[MoodSummary]:
        """List the mood presets."""
        return [MoodSummary.from_preset(preset) for preset in MOOD_LIST]

    async def genres(self, credential: CurrentCredential) -> GenreSeedsResponse:
        """Return the genre seeds accepted by Spotify recommendations."""
        return GenreSeedsResponse(genres=get_available_genre_seeds())

    async def mood_playlist(
        self,
        credential: CurrentCredential,
        service: Service,
        mood: Annotated[str | None, Query()] = None,
        genres: Annotated[str | None, Query(description="Comma-separated genre override")] = None,
    ) -> RecommendationResult:
        """Resolve a mood into recommended tracks for the session user."""
        custom_genres = _split_genres(genres)
        try:
            return await service.get_recommendations(credential.access_token, mood, custom_genres)
        except (SpotifyClientError, ValidationError) as exc:
            logger.exception("Failed to fetch recommendations")
            raise HTTPException(status_code=500, detail="Unable to load recommendations from Spotify") from exc


def _split_genres(raw: str | None) -> list[str] | None:
    if not raw:
        return None
    parts = [part.strip() for part in raw.split(",") if part.strip()]
    return parts or None


_instance = RecommendationsRouter()
router = _instance.router
