"""
In-memory OAuth token store and the refresh protocol.

The store owns the single mutable access token of the process. Every read of
the token goes through ``refresh_access_token``, which holds the store's lock
for the whole exchange-and-overwrite sequence. Callers must make their
downstream request after the call returns, never inside it.
"""
import asyncio
import logging
import time
from typing import Any, Dict, Optional, Tuple

import httpx

from gateway.core.errors import SerializationError, TransportError
from gateway.schemas.gemini import CredentialBundle
from .config import REFRESH_GRANT_TYPE, TOKEN_URI
from .helpers import parse_json_body

logger = logging.getLogger(__name__)


class TokenStore:
    """
    Lock-guarded holder of the current access token and the fixed refresh
    credentials.
    """

    def __init__(
        self,
        credentials: CredentialBundle,
        token_uri: str = TOKEN_URI,
        refresh_every_request: bool = True,
        expiry_margin_seconds: float = 60.0,
    ):
        """
        Args:
            credentials: Bundle loaded at startup
            token_uri: OAuth 2.0 token endpoint
            refresh_every_request: If False, skip the exchange while the last
                reported expiry has not passed
            expiry_margin_seconds: Safety margin subtracted from the expiry
        """
        self._access_token = credentials.access_token
        self._refresh_token = credentials.refresh_token
        self._client_id = credentials.client_id
        self._client_secret = credentials.client_secret
        self.token_uri = token_uri
        self.refresh_every_request = refresh_every_request
        self.expiry_margin_seconds = expiry_margin_seconds
        self._expires_at: Optional[float] = None
        self._lock = asyncio.Lock()

    @property
    def access_token(self) -> str:
        """Last stored access token, without refreshing."""
        return self._access_token

    def is_refreshing(self) -> bool:
        """True while some task holds the store's lock."""
        return self._lock.locked()

    def _token_is_fresh(self) -> bool:
        if self._expires_at is None:
            return False
        return time.monotonic() < self._expires_at - self.expiry_margin_seconds

    def _build_refresh_form(self) -> Dict[str, str]:
        return {
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            "refresh_token": self._refresh_token,
            "grant_type": REFRESH_GRANT_TYPE,
        }

    async def refresh_access_token(self, client: httpx.AsyncClient) -> str:
        """
        Exchange the refresh token for a new access token and store it.

        If the token endpoint's reply has no string ``access_token`` field the
        stored token is kept and returned unchanged.

        Args:
            client: Shared HTTP client used for the exchange

        Returns:
            The current access token

        Raises:
            TransportError: If the token endpoint cannot be reached
            SerializationError: If the token endpoint reply is not JSON
        """
        async with self._lock:
            if not self.refresh_every_request and self._token_is_fresh():
                logger.debug("[TOKEN] Stored access token still valid, skipping refresh")
                return self._access_token

            access_token, expires_in = await self._exchange(client)

            if access_token is not None:
                self._access_token = access_token
                self._expires_at = (
                    time.monotonic() + expires_in if expires_in is not None else None
                )
                logger.info(f"[TOKEN] Access token refreshed: {access_token[:8]}...")
            else:
                logger.warning("[TOKEN] Token endpoint reply had no access_token, keeping stored token")

            return self._access_token

    async def _exchange(self, client: httpx.AsyncClient) -> Tuple[Optional[str], Optional[float]]:
        """
        POST the refresh form to the token endpoint.

        Returns:
            Tuple of (access_token or None, expires_in seconds or None)
        """
        try:
            response = await client.post(self.token_uri, data=self._build_refresh_form())
        except httpx.HTTPError as e:
            logger.error(f"[TOKEN] Token endpoint request failed: {e!r}")
            raise TransportError("Token endpoint request failed", cause=e) from e

        if response.is_error:
            logger.warning(f"[TOKEN] Token endpoint returned status {response.status_code}")

        try:
            data: Any = parse_json_body(response.content)
        except ValueError as e:
            logger.error(f"[TOKEN] Token endpoint reply is not JSON (status {response.status_code})")
            raise SerializationError("Token endpoint reply is not valid JSON", cause=e) from e

        if not isinstance(data, dict):
            return None, None

        access_token = data.get("access_token")
        if not isinstance(access_token, str):
            access_token = None

        expires_in = data.get("expires_in")
        if isinstance(expires_in, bool) or not isinstance(expires_in, (int, float)):
            expires_in = None

        return access_token, expires_in
