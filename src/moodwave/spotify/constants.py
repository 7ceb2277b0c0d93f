"""Spotify API URLs and request defaults."""

# Spotify Auth
SPOTIFY_ACCOUNTS_BASE = "https://accounts.spotify.com"
SPOTIFY_TOKEN_URL = f"{SPOTIFY_ACCOUNTS_BASE}/api/token"

# Spotify Web API base
SPOTIFY_API_BASE = "https://api.spotify.com/v1"

# Spotify Web API endpoints
ME_URL = f"{SPOTIFY_API_BASE}/me"
TOP_ARTISTS_URL = f"{SPOTIFY_API_BASE}/me/top/artists"
TOP_TRACKS_URL = f"{SPOTIFY_API_BASE}/me/top/tracks"
RECOMMENDATIONS_URL = f"{SPOTIFY_API_BASE}/recommendations"
USERS_URL = f"{SPOTIFY_API_BASE}/users"
PLAYLIST_URL = f"{SPOTIFY_API_BASE}/playlists"

# Request defaults
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds
DEFAULT_TIME_RANGE = "medium_term"
ERROR_BODY_PREVIEW_CHARS = 200
