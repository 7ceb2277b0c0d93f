"""Session, security and observability middleware."""

import logging
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from moodwave.auth.credentials import Credential
from moodwave.auth.session import SessionStore
from moodwave.logging.setup import request_id_var

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to every response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["X-XSS-Protection"] = "0"
        return response


class SessionCookieMiddleware(BaseHTTPMiddleware):
    """Write a replaced session credential back to the cookie.

    Endpoints stage the new credential on ``request.state`` (see
    ``stage_credential``); it is persisted whatever the response status, so a
    rotated refresh token survives an endpoint that fails afterwards.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.updated_credential = None
        request.state.session_store = None

        response = await call_next(request)

        credential: Credential | None = request.state.updated_credential
        store: SessionStore | None = request.state.session_store
        if credential is not None and store is not None:
            store.save(response, credential)
        return response


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assign a unique request ID to every request.

    Sets ``request.state.request_id``, exposes it to log records through
    ``request_id_var``, and adds an ``X-Request-ID`` response header.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers["X-Request-ID"] = request_id
        return response
