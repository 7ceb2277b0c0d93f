"""Shared fixtures: settings, credentials, and a FastAPI test client."""

from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta

import httpx
import pytest
from cryptography.fernet import Fernet
from fastapi.testclient import TestClient

from moodwave.auth.credentials import Credential
from moodwave.auth.session import SessionStore
from moodwave.main import app
from moodwave.settings import AppSettings, get_settings

TEST_FERNET_KEY = Fernet.generate_key().decode()


def make_settings(**overrides: object) -> AppSettings:
    values: dict[str, object] = {
        "SPOTIFY_CLIENT_ID": "test-client-id",
        "SPOTIFY_CLIENT_SECRET": "test-client-secret",
        "SESSION_ENCRYPTION_KEY": TEST_FERNET_KEY,
        "SESSION_COOKIE_SECURE": False,
    }
    values.update(overrides)
    return AppSettings(**values)  # type: ignore[arg-type]


def make_credential(
    *,
    access_token: str = "access-1",
    refresh_token: str = "refresh-1",
    expires_in: timedelta = timedelta(hours=1),
    error: str | None = None,
) -> Credential:
    return Credential(
        access_token=access_token,
        expires_at=datetime.now(UTC) + expires_in,
        refresh_token=refresh_token,
        scope="user-top-read",
        user_id="spotify-user",
        error=error,
    )


@pytest.fixture
def settings() -> AppSettings:
    return make_settings()


@pytest.fixture
def session_store(settings: AppSettings) -> SessionStore:
    return SessionStore(settings)


@pytest.fixture
def client(settings: AppSettings) -> Iterator[TestClient]:
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app, follow_redirects=False)
    app.dependency_overrides.clear()


@pytest.fixture
def signed_in(client: TestClient, session_store: SessionStore) -> Credential:
    """Attach a valid session cookie to ``client`` and return its credential."""
    credential = make_credential()
    client.cookies.set(session_store.cookie_name, session_store.encode(credential))
    return credential


@pytest.fixture
def credential_factory() -> Callable[..., Credential]:
    """Factory for credentials with overridable token values and expiry."""
    return make_credential


@pytest.fixture
def issued_credential(session_store: SessionStore) -> Callable[[httpx.Response], Credential | None]:
    """Decode the session credential a response sets, or None if it sets none."""

    def _read(response: httpx.Response) -> Credential | None:
        header = response.headers.get("set-cookie")
        if not header or not header.startswith(f"{session_store.cookie_name}="):
            return None
        value = header.split(";", 1)[0].split("=", 1)[1].strip('"')
        return session_store.decode(value)

    return _read
