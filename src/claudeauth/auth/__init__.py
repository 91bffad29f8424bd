"""
Token freshness, refresh and persistence for Claude CLI OAuth credentials.
"""

from claudeauth.auth.expiry import EXPIRY_BUFFER_SECONDS, is_token_expired
from claudeauth.auth.refresh import TOKEN_URL, TokenRefresher, refresh_token_if_needed
from claudeauth.auth.setup_oauth import setup_oauth_credentials
from claudeauth.auth.store import CredentialStore, default_credentials_path, persist

__all__ = [
    "EXPIRY_BUFFER_SECONDS",
    "TOKEN_URL",
    "CredentialStore",
    "TokenRefresher",
    "default_credentials_path",
    "is_token_expired",
    "persist",
    "refresh_token_if_needed",
    "setup_oauth_credentials",
]
