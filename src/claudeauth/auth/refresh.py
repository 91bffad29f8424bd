"""
Token refresher: exchanges a refresh token for a new access token.

The exchange is a single attempt against the Claude OAuth token endpoint.
Transport failures, non-2xx answers and unusable payloads all raise; the
caller never receives partially refreshed credentials.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from claudeauth.auth.expiry import is_token_expired, now_seconds
from claudeauth.errors import RefreshHttpError, TokenRefreshError, TokenRefreshFailedError
from claudeauth.models.credentials import OAuthCredentials

logger = logging.getLogger("claudeauth.auth.refresh")

TOKEN_URL = "https://claude.ai/api/oauth/token"


class TokenRefresher:
    """Refreshes OAuth credentials when they are stale.

    Usage::

        refresher = TokenRefresher()
        try:
            fresh = await refresher.refresh_if_needed(credentials)
        finally:
            await refresher.close()
    """

    def __init__(
        self,
        token_url: str = TOKEN_URL,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.token_url = token_url
        self.timeout = timeout
        self._http_client = http_client
        self._owns_client = http_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create a reusable httpx client."""
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self._http_client

    async def close(self) -> None:
        """Close the HTTP client if this refresher created it."""
        if self._owns_client and self._http_client and not self._http_client.is_closed:
            await self._http_client.aclose()

    async def refresh_if_needed(self, credentials: OAuthCredentials) -> OAuthCredentials:
        """Return ``credentials`` untouched if still fresh, otherwise refreshed ones.

        Raises:
            MalformedExpiryError: If ``expires_at`` is not integer seconds.
            RefreshHttpError: If the token endpoint rejects the refresh.
            TokenRefreshFailedError: If the exchange fails in transit or the
                response is unusable.
        """
        if not is_token_expired(credentials.expires_at_seconds):
            logger.info("Token is still valid, no refresh needed")
            return credentials

        logger.info("Token is expired or about to expire, refreshing...")
        try:
            refreshed = await self.refresh(credentials)
        except TokenRefreshError as e:
            logger.error("Failed to refresh token: %s", e)
            raise
        logger.info("Token refreshed successfully")
        return refreshed

    async def refresh(self, credentials: OAuthCredentials) -> OAuthCredentials:
        """Unconditionally run the refresh-token exchange."""
        client = await self._get_client()
        payload = {
            "grant_type": "refresh_token",
            "refresh_token": credentials.refresh_token,
        }

        logger.debug("POST %s", self.token_url)
        try:
            resp = await client.post(
                self.token_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            raise TokenRefreshFailedError(str(e) or type(e).__name__) from e

        if not resp.is_success:
            raise RefreshHttpError(resp.status_code, resp.reason_phrase)

        try:
            data = resp.json()
        except ValueError as e:
            raise TokenRefreshFailedError(f"invalid JSON in token response: {e}") from e

        return _credentials_from_response(data, previous=credentials)


def _credentials_from_response(data: Any, *, previous: OAuthCredentials) -> OAuthCredentials:
    """Shape a token endpoint response into new credentials."""
    if not isinstance(data, dict):
        raise TokenRefreshFailedError("token response is not a JSON object")

    access_token = data.get("access_token")
    if not access_token or not isinstance(access_token, str):
        raise TokenRefreshFailedError("token response is missing 'access_token'")

    expires_in = data.get("expires_in")
    if isinstance(expires_in, bool) or not isinstance(expires_in, int):
        raise TokenRefreshFailedError(f"token response has invalid 'expires_in': {expires_in!r}")

    # The endpoint may not rotate the refresh token.
    refresh_token = data.get("refresh_token") or previous.refresh_token
    if not isinstance(refresh_token, str):
        raise TokenRefreshFailedError(f"token response has invalid 'refresh_token': {refresh_token!r}")

    return OAuthCredentials(
        access_token=access_token,
        refresh_token=refresh_token,
        expires_at=str(now_seconds() + expires_in),
    )


async def refresh_token_if_needed(
    credentials: OAuthCredentials,
    *,
    token_url: str = TOKEN_URL,
    timeout: float = 30.0,
) -> OAuthCredentials:
    """One-shot helper: refresh if stale using a throwaway client."""
    refresher = TokenRefresher(token_url, timeout=timeout)
    try:
        return await refresher.refresh_if_needed(credentials)
    finally:
        await refresher.close()
