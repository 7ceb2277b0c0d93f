"""Pydantic schemas for token endpoint payloads and session responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SpotifyTokenResponse(BaseModel):
    """Response from Spotify's /api/token endpoint.

    Every field except ``access_token`` may be missing on a refresh; missing
    values leave the stored credential untouched.
    """

    access_token: str
    expires_in: int | None = None
    refresh_token: str | None = None
    token_type: str | None = None
    scope: str | None = None


class SessionStatus(BaseModel):
    """Response for GET /api/session."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    authenticated: bool
    user_id: str | None = None
    error: str | None = None
    expires_at: datetime | None = None


class LogoutResponse(BaseModel):
    """Response for POST /api/logout."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    spotify_logout_url: str
