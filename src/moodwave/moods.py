"""Mood catalog — static presets mapping moods to audio-feature filters.

Each preset carries default seed genres and a sparse set of bounds over the
audio features Spotify exposes to ``/recommendations``. Valence, energy and
danceability live in ``[0, 1]`` and are clamped when a preset is built; tempo
is in BPM and passed through untouched.
"""

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType


class MoodKey(enum.StrEnum):
    """Moods the catalog knows about."""

    HAPPY = "happy"
    SAD = "sad"
    ENERGETIC = "energetic"
    CHILL = "chill"
    FOCUS = "focus"
    ROMANTIC = "romantic"


DEFAULT_MOOD = MoodKey.HAPPY
MAX_SEED_GENRES = 5


def _clamp_unit(value: float | None) -> float | None:
    if value is None:
        return None
    return min(1.0, max(0.0, round(value, 2)))


@dataclass(frozen=True, slots=True)
class FeatureRanges:
    """Optional min/max bounds over valence, energy, danceability and tempo."""

    min_valence: float | None = None
    max_valence: float | None = None
    min_energy: float | None = None
    max_energy: float | None = None
    min_danceability: float | None = None
    max_danceability: float | None = None
    min_tempo: float | None = None
    max_tempo: float | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            if "tempo" in f.name:
                continue
            object.__setattr__(self, f.name, _clamp_unit(getattr(self, f.name)))

    def as_params(self) -> dict[str, float]:
        """Return only the defined bounds, keyed by their request parameter name."""
        return {f.name: value for f in fields(self) if (value := getattr(self, f.name)) is not None}


@dataclass(frozen=True, slots=True)
class MoodPreset:
    """A named bundle of default genres and audio-feature bounds."""

    key: MoodKey
    label: str
    description: str
    accent: str
    seed_genres: tuple[str, ...]
    ranges: FeatureRanges = field(default_factory=FeatureRanges)

    @property
    def default_genres(self) -> list[str]:
        """The preset's genres, capped at Spotify's five-seed limit."""
        return list(self.seed_genres[:MAX_SEED_GENRES])


_PRESETS = (
    MoodPreset(
        key=MoodKey.HAPPY,
        label="Happy",
        description="Feel-good pop and upbeat vibes.",
        accent="#1ed760",
        seed_genres=("pop", "dance", "disco"),
        ranges=FeatureRanges(min_valence=0.7, min_energy=0.6, min_danceability=0.6, min_tempo=100, max_tempo=140),
    ),
    MoodPreset(
        key=MoodKey.SAD,
        label="Melancholic",
        description="Moody ballads for reflective moments.",
        accent="#af52de",
        seed_genres=("acoustic", "indie", "soul"),
        ranges=FeatureRanges(max_valence=0.45, max_energy=0.5, min_tempo=60, max_tempo=100),
    ),
    MoodPreset(
        key=MoodKey.ENERGETIC,
        label="Energize",
        description="High-octane anthems for workouts.",
        accent="#f15e6c",
        seed_genres=("edm", "rock", "hip-hop"),
        ranges=FeatureRanges(min_energy=0.75, min_danceability=0.55, min_tempo=120, max_tempo=170),
    ),
    MoodPreset(
        key=MoodKey.CHILL,
        label="Chill",
        description="Lo-fi beats and late-night textures.",
        accent="#70a1ff",
        seed_genres=("chill", "ambient", "electronic"),
        ranges=FeatureRanges(max_energy=0.55, max_danceability=0.65, min_tempo=70, max_tempo=110),
    ),
    MoodPreset(
        key=MoodKey.FOCUS,
        label="Focus",
        description="Deep work with minimal distractions.",
        accent="#ffd166",
        seed_genres=("classical", "piano", "ambient"),
        ranges=FeatureRanges(
            max_energy=0.55, min_danceability=0.3, max_danceability=0.55, min_tempo=60, max_tempo=120
        ),
    ),
    MoodPreset(
        key=MoodKey.ROMANTIC,
        label="Romance",
        description="Smooth R&B and candlelight pop.",
        accent="#ff7eb3",
        seed_genres=("r-n-b", "soul", "pop"),
        ranges=FeatureRanges(
            min_valence=0.5, max_valence=0.85, min_energy=0.4, max_energy=0.75, min_tempo=70, max_tempo=120
        ),
    ),
)

MOOD_PRESETS: Mapping[MoodKey, MoodPreset] = MappingProxyType({p.key: p for p in _PRESETS})
MOOD_LIST: tuple[MoodPreset, ...] = _PRESETS


def lookup(key: MoodKey) -> MoodPreset:
    """Return the preset for *key*."""
    return MOOD_PRESETS[key]


def resolve(raw: str | None) -> MoodKey:
    """Map a raw mood string to a known key, case-insensitively.

    Missing or unrecognized input resolves to :data:`DEFAULT_MOOD`.
    """
    if not raw:
        return DEFAULT_MOOD
    try:
        return MoodKey(raw.strip().lower())
    except ValueError:
        return DEFAULT_MOOD
