"""Main FastAPI application for Moodwave."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from moodwave.auth.credentials import CredentialManager
from moodwave.auth.router import router as session_router
from moodwave.auth.session import SessionStore
from moodwave.constants import APP_DESCRIPTION, APP_TITLE, APP_VERSION, Routes, ServiceName
from moodwave.logging import configure_logging
from moodwave.middleware import RequestIDMiddleware, SecurityHeadersMiddleware, SessionCookieMiddleware
from moodwave.playlists.router import router as playlists_router
from moodwave.recommendations.router import router as recommendations_router
from moodwave.settings import get_settings

logger = logging.getLogger(__name__)


class MoodwaveApp:
    """Application container that wires middleware and routers."""

    app: FastAPI

    def __init__(self) -> None:
        configure_logging(ServiceName.API, level=get_settings().LOG_LEVEL)
        self.app = FastAPI(
            title=APP_TITLE,
            description=APP_DESCRIPTION,
            version=APP_VERSION,
            lifespan=self._lifespan,
        )
        self._setup_middleware()
        self._setup_routers()

    @staticmethod
    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """Application lifespan: fail fast when required configuration is missing."""
        settings = get_settings()
        CredentialManager(settings)
        SessionStore(settings)
        logger.info("Moodwave started")
        yield

    def _setup_middleware(self) -> None:
        # Session cookie write-back (innermost, sees endpoint state first)
        self.app.add_middleware(SessionCookieMiddleware)

        # Security headers
        self.app.add_middleware(SecurityHeadersMiddleware)

        # Request-ID (generates/propagates X-Request-ID)
        self.app.add_middleware(RequestIDMiddleware)

    def _setup_routers(self) -> None:
        self.app.include_router(session_router, prefix=Routes.SESSION.prefix, tags=[Routes.SESSION.tag])
        self.app.include_router(
            recommendations_router,
            prefix=Routes.RECOMMENDATIONS.prefix,
            tags=[Routes.RECOMMENDATIONS.tag],
        )
        self.app.include_router(playlists_router, prefix=Routes.PLAYLISTS.prefix, tags=[Routes.PLAYLISTS.tag])

        @self.app.get(Routes.HEALTH)
        async def health_check() -> dict[str, str]:
            """Health check endpoint."""
            return {"status": "healthy"}

        @self.app.get("/")
        async def root() -> dict[str, str]:
            """Root endpoint."""
            return {"message": APP_TITLE, "version": APP_VERSION}


_application = MoodwaveApp()
app: FastAPI = _application.app
