"""Spotify API client exceptions."""


class SpotifyClientError(Exception):
    """Base exception for Spotify client errors."""


class SpotifyTransportError(SpotifyClientError):
    """The request never produced an HTTP response (DNS, connect, timeout, ...)."""


class SpotifyResponseError(SpotifyClientError):
    """Spotify answered, but not with something we can use."""

    def __init__(self, status_code: int, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail or f"HTTP {status_code}")


class SpotifyAPIError(SpotifyResponseError):
    """Spotify returned a non-2xx status with a well-formed ``{"error": {...}}`` body."""

    def __init__(self, status_code: int, message: str) -> None:
        self.message = message
        super().__init__(status_code, f"Spotify API error {status_code}: {message}")


class SpotifyUnexpectedResponseError(SpotifyResponseError):
    """Spotify returned a non-2xx status whose body is not the documented error shape."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.reason = reason
        status = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(status_code, f"Unexpected Spotify API response ({status})")


class SpotifyMalformedResponseError(SpotifyResponseError):
    """Spotify returned a 2xx status but the body could not be decoded as JSON."""

    def __init__(self, status_code: int, body_preview: str = "") -> None:
        self.body_preview = body_preview
        super().__init__(status_code, f"Malformed Spotify response body (HTTP {status_code})")
