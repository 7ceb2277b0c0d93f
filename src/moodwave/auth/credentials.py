"""Credential lifecycle: expiry tracking and refresh-token rotation."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Self

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from moodwave.auth.exceptions import ConfigurationError
from moodwave.auth.schemas import SpotifyTokenResponse
from moodwave.settings import AppSettings
from moodwave.spotify.constants import ERROR_BODY_PREVIEW_CHARS, SPOTIFY_TOKEN_URL

logger = logging.getLogger(__name__)

REFRESH_ACCESS_TOKEN_ERROR = "RefreshAccessTokenError"
DEFAULT_EXPIRES_IN_SECONDS = 3600


class Credential(BaseModel):
    """One user's authorization state against Spotify.

    Immutable: a refresh produces a new value. A credential carrying
    ``error`` is terminal for the session and must not be refreshed again.
    """

    model_config = ConfigDict(frozen=True)

    access_token: str
    expires_at: datetime
    refresh_token: str
    token_type: str = "Bearer"
    scope: str = ""
    user_id: str | None = None
    error: str | None = None

    @classmethod
    def from_token_response(
        cls,
        token: SpotifyTokenResponse,
        *,
        now: datetime | None = None,
        user_id: str | None = None,
    ) -> Self:
        """Build a credential from the token response of the initial sign-in."""
        if token.refresh_token is None:
            raise ValueError("Initial token response must include a refresh token")
        issued_at = now or datetime.now(UTC)
        return cls(
            access_token=token.access_token,
            expires_at=issued_at + timedelta(seconds=token.expires_in or DEFAULT_EXPIRES_IN_SECONDS),
            refresh_token=token.refresh_token,
            token_type=token.token_type or "Bearer",
            scope=token.scope or "",
            user_id=user_id,
        )

    @property
    def has_error(self) -> bool:
        return self.error is not None


class CredentialManager:
    """Checks credential expiry and rotates access tokens via the refresh grant.

    Never raises on a failed refresh: the failure is tagged on the returned
    credential so the session layer can force a new sign-in.
    """

    def __init__(self, settings: AppSettings) -> None:
        if not settings.SPOTIFY_CLIENT_ID:
            raise ConfigurationError("SPOTIFY_CLIENT_ID")
        if not settings.SPOTIFY_CLIENT_SECRET:
            raise ConfigurationError("SPOTIFY_CLIENT_SECRET")
        self._auth = httpx.BasicAuth(settings.SPOTIFY_CLIENT_ID, settings.SPOTIFY_CLIENT_SECRET)
        self._timeout = settings.SPOTIFY_REQUEST_TIMEOUT_SECONDS

    @staticmethod
    def is_valid(credential: Credential, now: datetime | None = None) -> bool:
        """True iff *now* is strictly before the access-token expiry."""
        return (now or datetime.now(UTC)) < credential.expires_at

    async def ensure_valid(self, credential: Credential, now: datetime | None = None) -> Credential:
        """Return *credential* if it is still usable, otherwise a refreshed one.

        Error-flagged credentials are returned unchanged.
        """
        if credential.has_error or self.is_valid(credential, now):
            return credential
        return await self.refresh(credential, now)

    async def refresh(self, credential: Credential, now: datetime | None = None) -> Credential:
        """Exchange the stored refresh token for a new access token.

        On transport failure, non-2xx status, or an undecodable body, returns
        a copy of *credential* with ``error`` set to
        :data:`REFRESH_ACCESS_TOKEN_ERROR`.
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    SPOTIFY_TOKEN_URL,
                    auth=self._auth,
                    data={"grant_type": "refresh_token", "refresh_token": credential.refresh_token},
                )
        except httpx.HTTPError as exc:
            logger.warning("Error refreshing access token: %s", exc, extra={"user_id": credential.user_id})
            return self._failed(credential)

        if not response.is_success:
            logger.warning(
                "Spotify token refresh failed with HTTP %d: %s",
                response.status_code,
                response.text[:ERROR_BODY_PREVIEW_CHARS],
                extra={"user_id": credential.user_id, "status_code": response.status_code},
            )
            return self._failed(credential)

        try:
            token = SpotifyTokenResponse.model_validate_json(response.text)
        except ValidationError:
            logger.warning(
                "Failed to parse Spotify token response: %s", response.text[:ERROR_BODY_PREVIEW_CHARS]
            )
            return self._failed(credential)

        issued_at = now or datetime.now(UTC)
        expires_in = token.expires_in if token.expires_in is not None else DEFAULT_EXPIRES_IN_SECONDS
        logger.info(
            "Refreshed Spotify access token, expires in %ds", expires_in, extra={"user_id": credential.user_id}
        )
        return credential.model_copy(
            update={
                "access_token": token.access_token,
                "expires_at": issued_at + timedelta(seconds=expires_in),
                "refresh_token": token.refresh_token or credential.refresh_token,
                "token_type": token.token_type or credential.token_type,
                "scope": token.scope if token.scope is not None else credential.scope,
                "error": None,
            }
        )

    @staticmethod
    def _failed(credential: Credential) -> Credential:
        return credential.model_copy(update={"error": REFRESH_ACCESS_TOKEN_ERROR})
