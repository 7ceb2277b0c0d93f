"""Seed gathering from personal listening history and mood defaults."""

import asyncio
import logging
from collections.abc import Awaitable
from dataclasses import dataclass, field

from pydantic import ValidationError

from moodwave.moods import DEFAULT_MOOD, MAX_SEED_GENRES, MoodPreset, lookup
from moodwave.spotify.client import SpotifyClient
from moodwave.spotify.exceptions import SpotifyClientError

logger = logging.getLogger(__name__)

TOP_ARTISTS_LIMIT = 3
TOP_TRACKS_LIMIT = 2
MAX_SEED_ARTISTS = 2
MAX_SEED_TRACKS = 2


@dataclass(frozen=True, slots=True)
class PersonalSeeds:
    """Outcome of the personalization lookups.

    ``degraded`` is set when at least one lookup failed; the failed category
    is simply empty.
    """

    artist_ids: list[str] = field(default_factory=list)
    track_ids: list[str] = field(default_factory=list)
    degraded: bool = False


@dataclass(frozen=True, slots=True)
class SeedBundle:
    """Genre, artist and track seeds for one recommendation request."""

    genres: list[str] = field(default_factory=list)
    artists: list[str] = field(default_factory=list)
    tracks: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.genres or self.artists or self.tracks)


async def _collect_ids(label: str, lookup_call: Awaitable[list[str]]) -> list[str] | None:
    """Await one personalization lookup; ``None`` signals that it failed."""
    try:
        return await lookup_call
    except (SpotifyClientError, ValidationError) as exc:
        logger.warning("Unable to load top %s; falling back to mood presets: %s", label, exc)
        return None


async def _top_artist_ids(client: SpotifyClient) -> list[str]:
    response = await client.get_top_artists(limit=TOP_ARTISTS_LIMIT)
    return [artist.id for artist in response.items if artist.id]


async def _top_track_ids(client: SpotifyClient) -> list[str]:
    response = await client.get_top_tracks(limit=TOP_TRACKS_LIMIT)
    return [track.id for track in response.items if track.id]


async def fetch_personal_seeds(client: SpotifyClient) -> PersonalSeeds:
    """Fetch the user's top artists and top tracks concurrently.

    Each lookup fails independently and never raises out of here.
    """
    artist_ids, track_ids = await asyncio.gather(
        _collect_ids("artists", _top_artist_ids(client)),
        _collect_ids("tracks", _top_track_ids(client)),
    )
    return PersonalSeeds(
        artist_ids=artist_ids or [],
        track_ids=track_ids or [],
        degraded=artist_ids is None or track_ids is None,
    )


def build_seed_bundle(preset: MoodPreset, personal: PersonalSeeds) -> SeedBundle:
    """Blend the preset's genres with personal seeds.

    Falls back to the default mood's genres if every category would be empty.
    """
    bundle = SeedBundle(
        genres=preset.default_genres,
        artists=personal.artist_ids[:MAX_SEED_ARTISTS],
        tracks=personal.track_ids[:MAX_SEED_TRACKS],
    )
    if bundle.is_empty:
        return SeedBundle(genres=lookup(DEFAULT_MOOD).default_genres)
    return bundle


def select_genres(bundle: SeedBundle, custom_genres: list[str] | None) -> list[str]:
    """Caller-supplied genres win over the bundle's, capped at five."""
    if custom_genres:
        return custom_genres[:MAX_SEED_GENRES]
    return bundle.genres
