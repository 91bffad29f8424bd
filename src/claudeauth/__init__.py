"""
claudeauth: OAuth credential setup for the Claude CLI.

Refreshes a stale access token and writes ``~/.claude/.credentials.json``.
"""

__version__ = "0.1.0"
__all__ = ["OAuthCredentials", "setup_oauth_credentials"]

from claudeauth.auth.setup_oauth import setup_oauth_credentials  # noqa: E402
from claudeauth.models.credentials import OAuthCredentials  # noqa: E402
