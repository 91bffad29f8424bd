"""Access-token freshness check."""

from __future__ import annotations

import time

# Refresh this many seconds before the nominal expiry so a token never lapses mid-request.
EXPIRY_BUFFER_SECONDS = 300


def now_seconds() -> int:
    return int(time.time())


def is_token_expired(expires_at: int, *, now: int | None = None) -> bool:
    """Return True if the token expires within the buffer window (or already has).

    A token with exactly ``EXPIRY_BUFFER_SECONDS`` left counts as expired.
    """
    if now is None:
        now = now_seconds()
    return now >= expires_at - EXPIRY_BUFFER_SECONDS
