"""
Shared dependencies for API endpoints.

Everything here reads from ``app.state``, which ``create_app`` populates.
"""
import httpx
from fastapi import Depends, Request

from gateway.core.config import Settings
from gateway.gemini.config import get_generate_content_url
from gateway.gemini.services import GoogleProxyService
from gateway.gemini.token_store import TokenStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_store(request: Request) -> TokenStore:
    return request.app.state.token_store


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Shared outbound client, opened by the application lifespan.
    """
    return request.app.state.http_client


def get_proxy_service(
    settings: Settings = Depends(get_settings),
    token_store: TokenStore = Depends(get_token_store),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> GoogleProxyService:
    """
    Build a proxy service bound to the process-wide token store.
    """
    return GoogleProxyService(
        client=client,
        token_store=token_store,
        userinfo_url=settings.USERINFO_URL,
        generate_url=get_generate_content_url(settings.GEMINI_API_BASE, settings.GEMINI_MODEL),
    )
