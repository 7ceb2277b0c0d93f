"""Request/response schemas for the save-playlist endpoint."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SavePlaylistRequest(BaseModel):
    """Body of POST /api/save-playlist."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    track_uris: list[str] = Field(default_factory=list)
    name: str | None = None
    description: str | None = None
    mood: str | None = None


class SavePlaylistResponse(BaseModel):
    """Response of POST /api/save-playlist."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    playlist_id: str
