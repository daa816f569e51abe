"""
Google proxy service.

Provides functionality for:
- Relaying the OpenID userinfo document of the token's owner
- Relaying a single-prompt generateContent call to Gemini

Both calls refresh the access token first and then make exactly one
downstream request. The downstream status and JSON body are returned
untouched.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from gateway.core.errors import GatewayError, SerializationError, TransportError
from gateway.schemas.gemini import GeminiGenerateContentRequest, RelayedResponse
from ..helpers import build_request_headers, parse_json_body
from ..token_store import TokenStore

logger = logging.getLogger(__name__)


class GoogleProxyService:
    """
    Service class for proxying requests to Google APIs with a shared token.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        token_store: TokenStore,
        userinfo_url: str,
        generate_url: str,
    ):
        """
        Initialize the proxy service.

        Args:
            client: Shared HTTP client
            token_store: Process-wide token store
            userinfo_url: OpenID identity endpoint
            generate_url: Gemini generateContent endpoint for the configured model
        """
        self.client = client
        self.token_store = token_store
        self.userinfo_url = userinfo_url
        self.generate_url = generate_url

    async def _get_access_token(self, operation: str) -> str:
        try:
            return await self.token_store.refresh_access_token(self.client)
        except GatewayError as e:
            logger.error(f"[PROXY] {operation}: token refresh failed ({e.kind})")
            raise

    async def userinfo(self) -> RelayedResponse:
        """
        Fetch the identity document for the stored credentials.

        Raises:
            GatewayError: If the refresh or the downstream call fails
        """
        access_token = await self._get_access_token("userinfo")
        return await self._send("userinfo", "GET", self.userinfo_url, access_token)

    async def generate(self, prompt: str) -> RelayedResponse:
        """
        Send a single user prompt to Gemini.

        Args:
            prompt: Prompt text

        Raises:
            GatewayError: If the refresh or the downstream call fails
        """
        access_token = await self._get_access_token("generate")
        payload = GeminiGenerateContentRequest.from_prompt(prompt)
        return await self._send(
            "generate",
            "POST",
            self.generate_url,
            access_token,
            json_body=payload.model_dump(),
        )

    async def _send(
        self,
        operation: str,
        method: str,
        url: str,
        access_token: str,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> RelayedResponse:
        """
        Make one bearer-authenticated downstream request and relay its result.
        """
        headers = build_request_headers(access_token)
        logger.info(f"[PROXY] {operation}: {method} {url}")

        try:
            response = await self.client.request(method, url, headers=headers, json=json_body)
        except httpx.HTTPError as e:
            logger.error(f"[PROXY] {operation}: downstream request failed: {e!r}")
            raise TransportError(f"Downstream {operation} request failed", cause=e) from e

        try:
            body = parse_json_body(response.content)
        except ValueError as e:
            logger.error(
                f"[PROXY] {operation}: downstream reply is not JSON (status {response.status_code})"
            )
            raise SerializationError(f"Downstream {operation} reply is not valid JSON", cause=e) from e

        if response.is_error:
            logger.warning(f"[PROXY] {operation}: relaying downstream status {response.status_code}")
        else:
            logger.info(f"[PROXY] {operation}: relaying downstream status {response.status_code}")

        return RelayedResponse(status_code=response.status_code, body=body)
