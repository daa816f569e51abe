"""Shared fixtures for gateway tests."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from gateway.core.config import Settings
from gateway.gemini.token_store import TokenStore
from gateway.main import create_app
from gateway.schemas.gemini import CredentialBundle

TOKEN_URI = "https://oauth2.example.test/token"
USERINFO_URL = "https://openid.example.test/v1/userinfo"
GEMINI_API_BASE = "https://generative.example.test/v1"
GEMINI_MODEL = "gemini-test"
GENERATE_URL = f"{GEMINI_API_BASE}/models/{GEMINI_MODEL}:generateContent"

CREDENTIALS = {
    "access_token": "A",
    "refresh_token": "R",
    "client_id": "C",
    "client_secret": "S",
}


@pytest.fixture
def credentials() -> CredentialBundle:
    return CredentialBundle(**CREDENTIALS)


@pytest.fixture
def credentials_file(tmp_path: Path) -> Path:
    path = tmp_path / "oauth.json"
    path.write_text(json.dumps(CREDENTIALS), encoding="utf-8")
    return path


@pytest.fixture
def test_settings(credentials_file: Path) -> Settings:
    return Settings(
        CREDENTIALS_FILE=str(credentials_file),
        TOKEN_URI=TOKEN_URI,
        USERINFO_URL=USERINFO_URL,
        GEMINI_API_BASE=GEMINI_API_BASE,
        GEMINI_MODEL=GEMINI_MODEL,
    )


@pytest.fixture
def token_store(credentials: CredentialBundle) -> TokenStore:
    return TokenStore(credentials, token_uri=TOKEN_URI)


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Real httpx client for respx mocking."""
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def client(test_settings: Settings) -> Iterator[TestClient]:
    """Test client with the application lifespan running."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client
