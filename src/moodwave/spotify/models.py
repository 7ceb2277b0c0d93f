"""Pydantic models for Spotify Web API responses.

These are pure data models matching Spotify's JSON structure.
No session or auth dependencies.
"""

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------


class SpotifyImage(BaseModel):
    """Image object returned by Spotify (album art, artist photos, etc.)."""

    url: str
    height: int | None = None
    width: int | None = None


# ---------------------------------------------------------------------------
# Artists
# ---------------------------------------------------------------------------


class SpotifyArtistSimplified(BaseModel):
    """Simplified artist object (embedded in tracks, albums)."""

    id: str | None = None
    name: str
    uri: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)


class SpotifyArtistFull(SpotifyArtistSimplified):
    """Full artist object (from top artists)."""

    genres: list[str] = Field(default_factory=list)
    popularity: int | None = None
    images: list[SpotifyImage] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Albums & tracks
# ---------------------------------------------------------------------------


class SpotifyAlbumSimplified(BaseModel):
    """Simplified album object (embedded in tracks)."""

    id: str | None = None
    name: str
    uri: str | None = None
    images: list[SpotifyImage] = Field(default_factory=list)
    external_urls: dict[str, str] = Field(default_factory=dict)


class SpotifyTrack(BaseModel):
    """Full track object from Spotify."""

    id: str | None = None
    name: str
    uri: str | None = None
    preview_url: str | None = None
    duration_ms: int | None = None
    explicit: bool | None = None
    popularity: int | None = None
    artists: list[SpotifyArtistSimplified] = Field(default_factory=list)
    album: SpotifyAlbumSimplified | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Top items
# ---------------------------------------------------------------------------


class TopArtistsResponse(BaseModel):
    """Response from GET /me/top/artists."""

    items: list[SpotifyArtistFull] = Field(default_factory=list)
    total: int | None = None
    limit: int | None = None
    offset: int | None = None
    next: str | None = None


class TopTracksResponse(BaseModel):
    """Response from GET /me/top/tracks."""

    items: list[SpotifyTrack] = Field(default_factory=list)
    total: int | None = None
    limit: int | None = None
    offset: int | None = None
    next: str | None = None


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------


class RecommendationSeed(BaseModel):
    """Seed echo returned alongside recommendations."""

    id: str | None = None
    type: str | None = None
    initialPoolSize: int | None = None
    afterFilteringSize: int | None = None


class RecommendationsResponse(BaseModel):
    """Response from GET /recommendations."""

    tracks: list[SpotifyTrack] = Field(default_factory=list)
    seeds: list[RecommendationSeed] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Profile & playlists
# ---------------------------------------------------------------------------


class SpotifyUserProfile(BaseModel):
    """User profile from GET /me."""

    id: str
    display_name: str | None = None
    email: str | None = None
    country: str | None = None
    product: str | None = None


class SpotifyPlaylistOwner(BaseModel):
    """Playlist owner object."""

    id: str | None = None
    display_name: str | None = None


class SpotifyPlaylist(BaseModel):
    """Playlist object from POST /users/{id}/playlists."""

    id: str
    name: str
    description: str | None = None
    public: bool | None = None
    owner: SpotifyPlaylistOwner | None = None
    snapshot_id: str | None = None
    uri: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)


class SpotifySnapshotResponse(BaseModel):
    """Response from add-tracks operations."""

    snapshot_id: str | None = None
