"""
Credential models: the in-memory working form and the on-disk record.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from claudeauth.errors import MalformedExpiryError

# Scopes granted to the Claude CLI; always written verbatim.
OAUTH_SCOPES: tuple[str, ...] = ("user:inference", "user:profile")

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_expires_at(value: Any) -> int:
    """Convert an expiry given as text (or int) into integer Unix seconds.

    Raises:
        MalformedExpiryError: If the value is not a base-10 integer.
    """
    if isinstance(value, bool):
        raise MalformedExpiryError(value)
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise MalformedExpiryError(value)
    text = value.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise MalformedExpiryError(value)
    return int(text)


@dataclass
class OAuthCredentials:
    """Access/refresh token pair with its expiry as Unix-seconds text."""

    access_token: str
    refresh_token: str
    expires_at: str

    @property
    def expires_at_seconds(self) -> int:
        return parse_expires_at(self.expires_at)

    def to_persisted(self) -> dict[str, Any]:
        """Build the ``.credentials.json`` document for these credentials."""
        return {
            "claudeAiOauth": {
                "accessToken": self.access_token,
                "refreshToken": self.refresh_token,
                "expiresAt": self.expires_at_seconds,
                "scopes": list(OAUTH_SCOPES),
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OAuthCredentials:
        """Accept the camelCase keys used by the credentials file and CLI inputs."""
        return cls(
            access_token=data["accessToken"],
            refresh_token=data["refreshToken"],
            expires_at=str(data["expiresAt"]),
        )

    @classmethod
    def from_persisted(cls, document: dict[str, Any]) -> OAuthCredentials:
        return cls.from_dict(document["claudeAiOauth"])
