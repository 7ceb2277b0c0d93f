"""Pydantic schemas for recommendation results and the mood catalog endpoint."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from moodwave.moods import MoodKey, MoodPreset


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SimplifiedArtist(_CamelModel):
    """Artist reference attached to a simplified track."""

    id: str | None = None
    name: str


class SimplifiedAlbum(_CamelModel):
    """Album reference with the first cover image, if any."""

    id: str | None = None
    name: str | None = None
    image: str | None = None


class SimplifiedTrack(_CamelModel):
    """Normalized, UI-ready track.

    ``preview_url`` is frequently null upstream; that means "preview
    unavailable", not an error.
    """

    id: str | None = None
    name: str
    uri: str | None = None
    preview_url: str | None = None
    album: SimplifiedAlbum
    artists: list[SimplifiedArtist] = Field(default_factory=list)
    external_url: str | None = None


class RecommendationResult(_CamelModel):
    """Response for GET /api/mood-playlist."""

    mood: MoodKey
    tracks: list[SimplifiedTrack] = Field(default_factory=list)


class MoodSummary(_CamelModel):
    """One entry of GET /api/moods."""

    key: MoodKey
    label: str
    description: str
    accent: str
    seed_genres: list[str]
    ranges: dict[str, float]

    @classmethod
    def from_preset(cls, preset: MoodPreset) -> "MoodSummary":
        return cls(
            key=preset.key,
            label=preset.label,
            description=preset.description,
            accent=preset.accent,
            seed_genres=preset.default_genres,
            ranges=preset.ranges.as_params(),
        )


class GenreSeedsResponse(BaseModel):
    """Response for GET /api/genres."""

    genres: list[str]
