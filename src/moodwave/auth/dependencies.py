"""FastAPI dependencies for session-authenticated endpoints."""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request

from moodwave.auth.credentials import Credential, CredentialManager
from moodwave.auth.session import SessionStore
from moodwave.settings import AppSettings, get_settings

logger = logging.getLogger(__name__)

Settings = Annotated[AppSettings, Depends(get_settings)]


def get_session_store(settings: Settings) -> SessionStore:
    """FastAPI dependency that provides a SessionStore instance."""
    return SessionStore(settings)


def get_credential_manager(settings: Settings) -> CredentialManager:
    """FastAPI dependency that provides a CredentialManager instance."""
    return CredentialManager(settings)


Store = Annotated[SessionStore, Depends(get_session_store)]
Manager = Annotated[CredentialManager, Depends(get_credential_manager)]


def stage_credential(request: Request, store: SessionStore, credential: Credential) -> None:
    """Queue *credential* to replace the session cookie once the response is built.

    ``SessionCookieMiddleware`` writes it back regardless of the response
    status, so a refresh is never lost when the endpoint itself fails.
    """
    request.state.session_store = store
    request.state.updated_credential = credential


async def require_credential(request: Request, store: Store, manager: Manager) -> Credential:
    """Require a usable session credential, refreshing it when expired.

    Raises HTTPException(401) when there is no session or the credential is
    error-flagged; the caller must sign in again.
    """
    credential = store.load(request)
    if credential is None:
        raise HTTPException(status_code=401, detail="Unauthorized")

    fresh = await manager.ensure_valid(credential)
    if fresh is not credential:
        stage_credential(request, store, fresh)

    if fresh.error is not None:
        logger.info("Session credential for user %s needs re-authentication", fresh.user_id)
        raise HTTPException(status_code=401, detail=fresh.error)
    return fresh


async def get_optional_credential(request: Request, store: Store) -> Credential | None:
    """Return the raw session credential, or None. Does NOT refresh or raise."""
    return store.load(request)


CurrentCredential = Annotated[Credential, Depends(require_credential)]
OptionalCredential = Annotated[Credential | None, Depends(get_optional_credential)]
