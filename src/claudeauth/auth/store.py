"""
Credential store: reads and writes ``~/.claude/.credentials.json``.

Writes always replace the whole file: the document is written to a
temporary sibling and moved over the target with ``os.replace``.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from claudeauth.errors import CredentialError, StorageError
from claudeauth.models.credentials import OAuthCredentials, parse_expires_at

logger = logging.getLogger("claudeauth.auth.store")


def default_credentials_path() -> Path:
    """``<home>/.claude/.credentials.json``, resolved at call time."""
    return Path.home() / ".claude" / ".credentials.json"


class CredentialStore:
    """Persists OAuth credentials in the Claude CLI file format."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path).expanduser() if path else default_credentials_path()

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, credentials: OAuthCredentials) -> Path:
        """Write ``credentials`` as the complete contents of the file.

        Raises:
            MalformedExpiryError: If ``expires_at`` is not integer seconds.
            StorageError: If the directory or file cannot be written.
        """
        # Invalid expiry raises here, before any filesystem access.
        document = credentials.to_persisted()
        data_json = json.dumps(document, indent=2) + "\n"

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(self.path.parent, f"Cannot create credentials directory ({e})") from e

        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data_json)
            # Credentials file stays owner-only.
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise StorageError(self.path, f"Cannot write credentials file ({e})") from e
        finally:
            if tmp_name is not None:
                _discard(tmp_name)

        logger.debug("Saved credentials to %s", self.path)
        return self.path

    def load(self) -> OAuthCredentials | None:
        """Read stored credentials, or None if no file exists.

        Raises:
            StorageError: If the file is unreadable or not a credentials document.
        """
        if not self.path.exists():
            return None
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
            credentials = OAuthCredentials.from_persisted(document)
            parse_expires_at(credentials.expires_at)
        except OSError as e:
            raise StorageError(self.path, f"Cannot read credentials file ({e})") from e
        except (ValueError, KeyError, TypeError, CredentialError) as e:
            raise StorageError(self.path, f"Malformed credentials file ({e})") from e
        logger.debug("Loaded credentials from %s", self.path)
        return credentials

    def delete(self) -> bool:
        """Delete the stored file.

        Returns:
            True if a file was deleted, False if none existed.
        """
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(self.path, f"Cannot delete credentials file ({e})") from e
        logger.info("Deleted credentials file %s", self.path)
        return True


def _discard(name: str) -> None:
    try:
        os.unlink(name)
    except OSError:
        logger.debug("Could not remove temporary file %s", name)


def persist(credentials: OAuthCredentials, target_path: Path | str) -> Path:
    """Write ``credentials`` to ``target_path``, replacing any previous contents."""
    return CredentialStore(target_path).save(credentials)
