"""Encrypted cookie persistence for the per-session credential."""

import logging

from cryptography.fernet import InvalidToken
from fastapi import Request, Response
from pydantic import ValidationError

from moodwave.auth.credentials import Credential
from moodwave.auth.crypto import TokenEncryptor
from moodwave.auth.exceptions import ConfigurationError
from moodwave.settings import AppSettings

logger = logging.getLogger(__name__)


class SessionStore:
    """Reads and writes the session credential as a Fernet-encrypted cookie.

    The core never persists credentials; this is the hosting layer's side of
    that contract. Callers must write back whatever credential the credential
    manager returns, since refreshes produce new values.
    """

    def __init__(self, settings: AppSettings) -> None:
        if not settings.SESSION_ENCRYPTION_KEY:
            raise ConfigurationError("SESSION_ENCRYPTION_KEY")
        self._encryptor = TokenEncryptor(settings.SESSION_ENCRYPTION_KEY)
        self._cookie_name = settings.SESSION_COOKIE_NAME
        self._cookie_secure = settings.SESSION_COOKIE_SECURE
        self._max_age = settings.SESSION_MAX_AGE_SECONDS

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def encode(self, credential: Credential) -> str:
        """Serialize and encrypt *credential* into a cookie value."""
        return self._encryptor.encrypt(credential.model_dump_json())

    def decode(self, value: str) -> Credential | None:
        """Decrypt a cookie value. Returns ``None`` for tampered or stale cookies."""
        try:
            plaintext = self._encryptor.decrypt(value, ttl_seconds=self._max_age)
        except InvalidToken:
            logger.info("Discarding session cookie that failed to decrypt")
            return None
        try:
            return Credential.model_validate_json(plaintext)
        except ValidationError:
            logger.warning("Discarding session cookie with an invalid credential payload")
            return None

    def load(self, request: Request) -> Credential | None:
        """Return the credential attached to *request*, if any."""
        value = request.cookies.get(self._cookie_name)
        if not value:
            return None
        return self.decode(value)

    def save(self, response: Response, credential: Credential) -> None:
        """Attach *credential* to *response* as an HTTP-only cookie."""
        response.set_cookie(
            key=self._cookie_name,
            value=self.encode(credential),
            max_age=self._max_age,
            httponly=True,
            secure=self._cookie_secure,
            samesite="lax",
            path="/",
        )

    def clear(self, response: Response) -> None:
        """Remove the session cookie."""
        response.delete_cookie(self._cookie_name, path="/")
