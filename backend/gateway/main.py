"""
Main module for the FastAPI application.
"""
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI

from gateway.api.v1.gemini_proxy import router as gemini_proxy_router
from gateway.api.v1.server_info import router as server_info_router
from gateway.core.config import Settings, settings as default_settings
from gateway.core.errors import GatewayError, gateway_error_handler
from gateway.core.version import API_VERSION
from gateway.gemini.auth import load_credentials_from_file
from gateway.gemini.token_store import TokenStore
from gateway.schemas.gemini import CredentialBundle

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    credentials: Optional[CredentialBundle] = None,
) -> FastAPI:
    """
    Build the gateway application.

    The credential file is read here, before any listener exists, so a
    missing or malformed file aborts startup.

    Args:
        settings: Settings to use (defaults to the environment-loaded settings)
        credentials: Pre-loaded credentials; read from
            ``settings.CREDENTIALS_FILE`` when omitted

    Raises:
        GatewayError: If the credential file cannot be read or parsed
    """
    settings = settings or default_settings

    if credentials is None:
        credentials = load_credentials_from_file(settings.CREDENTIALS_FILE)

    token_store = TokenStore(
        credentials,
        token_uri=settings.TOKEN_URI,
        refresh_every_request=settings.REFRESH_EVERY_REQUEST,
        expiry_margin_seconds=settings.TOKEN_EXPIRY_MARGIN_SECONDS,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan event handler - owns the shared outbound HTTP client.
        """
        async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS) as client:
            app.state.http_client = client
            logger.info(f"[GATEWAY] Gemini OAuth Gateway {API_VERSION} started")
            logger.info(f"[GATEWAY] Token endpoint: {settings.TOKEN_URI}")
            logger.info(f"[GATEWAY] Model: {settings.GEMINI_MODEL}")
            yield
        logger.info("[GATEWAY] Gemini OAuth Gateway shutting down")

    app = FastAPI(
        title="Gemini OAuth Gateway",
        description="Local gateway to Google userinfo and Gemini with a shared OAuth token",
        version=API_VERSION,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.token_store = token_store

    app.add_exception_handler(GatewayError, gateway_error_handler)

    app.include_router(gemini_proxy_router)
    app.include_router(server_info_router)

    return app


def run(settings: Optional[Settings] = None) -> None:
    """
    Load credentials, then bind the listener and serve.

    Exits with status 1 without binding if the credentials cannot be loaded.
    """
    settings = settings or default_settings

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = create_app(settings)
    except GatewayError as e:
        logger.critical(f"[GATEWAY] Startup aborted ({e.kind}): {e}")
        sys.exit(1)

    logger.info(f"[GATEWAY] Server running on http://{settings.API_HOST}:{settings.API_PORT}")
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    run()
