"""Credential lifecycle and session persistence."""

from moodwave.auth.credentials import REFRESH_ACCESS_TOKEN_ERROR, Credential, CredentialManager
from moodwave.auth.exceptions import ConfigurationError

__all__ = ["REFRESH_ACCESS_TOKEN_ERROR", "ConfigurationError", "Credential", "CredentialManager"]
