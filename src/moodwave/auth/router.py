"""Session credential endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from moodwave.auth.dependencies import Manager, OptionalCredential, Store, stage_credential
from moodwave.auth.schemas import LogoutResponse, SessionStatus
from moodwave.constants import SPOTIFY_LOGOUT_URL

logger = logging.getLogger(__name__)


class SessionRouter:
    """Class-based router for the session credential lifecycle."""

    def __init__(self) -> None:
        self.router = APIRouter()
        self.router.add_api_route("/session", self.session, methods=["GET"])
        self.router.add_api_route("/session/refresh", self.refresh, methods=["POST"])
        self.router.add_api_route("/logout", self.logout, methods=["POST"], response_model=None)

    async def session(self, credential: OptionalCredential) -> SessionStatus:
        """Report whether the session carries a credential, without refreshing it."""
        if credential is None:
            return SessionStatus(authenticated=False)
        return SessionStatus(
            authenticated=credential.error is None,
            user_id=credential.user_id,
            error=credential.error,
            expires_at=credential.expires_at,
        )

    async def refresh(self, request: Request, store: Store, manager: Manager) -> SessionStatus:
        """Rotate the session's access token now, regardless of expiry."""
        credential = store.load(request)
        if credential is None:
            raise HTTPException(status_code=401, detail="Unauthorized")
        if credential.error is not None:
            raise HTTPException(status_code=401, detail=credential.error)

        logger.info("Forcing access token refresh for user %s", credential.user_id)
        refreshed = await manager.refresh(credential)
        stage_credential(request, store, refreshed)
        if refreshed.error is not None:
            raise HTTPException(status_code=401, detail=refreshed.error)
        return SessionStatus(
            authenticated=True,
            user_id=refreshed.user_id,
            expires_at=refreshed.expires_at,
        )

    async def logout(self, store: Store) -> JSONResponse:
        """Clear the session cookie and point the client at Spotify's logout page."""
        body = LogoutResponse(message="Logged out", spotify_logout_url=SPOTIFY_LOGOUT_URL)
        response = JSONResponse(content=body.model_dump(by_alias=True))
        store.clear(response)
        return response


_instance = SessionRouter()
router = _instance.router
