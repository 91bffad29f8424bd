"""
Exceptions raised while refreshing and persisting OAuth credentials.

Every failure aborts the whole setup operation; nothing is written to disk
once one of these has been raised.
"""

from __future__ import annotations

from pathlib import Path


class CredentialError(Exception):
    """Base class for all claudeauth failures."""


class MalformedExpiryError(CredentialError, ValueError):
    """The supplied expiry is not a base-10 integer of Unix seconds."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid expiresAt value {value!r}: expected integer Unix seconds")


class TokenRefreshError(CredentialError):
    """Base class for failures of the refresh exchange."""


class RefreshHttpError(TokenRefreshError):
    """The token endpoint answered with a non-success status."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Token refresh failed: {status_code} {reason}")


class TokenRefreshFailedError(TokenRefreshError):
    """The refresh exchange could not be completed (transport or bad payload)."""

    def __init__(self, cause: str) -> None:
        self.cause = cause
        super().__init__(f"Token refresh failed: {cause}")


class StorageError(CredentialError):
    """The credentials file could not be read or written."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{message}: {path}")


__all__ = [
    "CredentialError",
    "MalformedExpiryError",
    "RefreshHttpError",
    "StorageError",
    "TokenRefreshError",
    "TokenRefreshFailedError",
]
