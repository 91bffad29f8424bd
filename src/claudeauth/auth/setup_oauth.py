"""Top-level setup: refresh stale credentials, then write the credentials file."""

from __future__ import annotations

import logging
from pathlib import Path

from claudeauth.auth.refresh import TokenRefresher
from claudeauth.auth.store import CredentialStore
from claudeauth.models.credentials import OAuthCredentials

logger = logging.getLogger("claudeauth.auth.setup")


async def setup_oauth_credentials(
    credentials: OAuthCredentials,
    *,
    credentials_path: Path | str | None = None,
    refresher: TokenRefresher | None = None,
) -> Path:
    """Refresh ``credentials`` if needed and persist them.

    Every call fully replaces the file; any failure raises before it is touched.

    Args:
        credentials: Tokens supplied by the caller.
        credentials_path: Target file (default ``~/.claude/.credentials.json``).
        refresher: Refresher to use; one with default settings is created
            (and closed afterwards) when omitted.

    Returns:
        The path that was written.
    """
    store = CredentialStore(credentials_path)
    own_refresher = refresher is None
    if refresher is None:
        refresher = TokenRefresher()

    try:
        fresh = await refresher.refresh_if_needed(credentials)
    finally:
        if own_refresher:
            await refresher.close()

    path = store.save(fresh)
    logger.info("OAuth credentials written to %s", path)
    return path
