"""
Pydantic schemas for the Gemini gateway.

Includes:
- The OAuth credential bundle loaded at startup
- The inbound prompt payload
- The native Gemini generateContent request envelope
- The relayed downstream response
"""
from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# OAuth Credentials Schemas
# ============================================================================

class CredentialBundle(BaseModel):
    """
    Google OAuth 2.0 credentials read from the credential file.

    Only ``access_token`` changes during the process lifetime; the refresh
    credentials are fixed once loaded. Extra keys in the file are ignored.
    """
    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., description="Current access token")
    refresh_token: str = Field(..., description="Refresh token for obtaining new access tokens")
    client_id: str = Field(..., description="Google OAuth client ID")
    client_secret: str = Field(..., description="Google OAuth client secret")


# ============================================================================
# Gateway Request Schemas
# ============================================================================

class PromptRequest(BaseModel):
    """Inbound payload for the generate route."""
    prompt: str = Field(..., description="Prompt text forwarded to Gemini")


# ============================================================================
# Native Gemini API Schemas
# ============================================================================

class GeminiPart(BaseModel):
    """A single part of a Gemini content entry."""
    text: str


class GeminiContent(BaseModel):
    """Gemini content entry (one conversation turn)."""
    role: Literal["user", "model"] = "user"
    parts: List[GeminiPart]


class GeminiGenerateContentRequest(BaseModel):
    """Native Gemini generateContent request body."""
    contents: List[GeminiContent]

    @classmethod
    def from_prompt(cls, prompt: str) -> "GeminiGenerateContentRequest":
        """Wrap a prompt into a single user turn."""
        return cls(contents=[GeminiContent(role="user", parts=[GeminiPart(text=prompt)])])


# ============================================================================
# Relay Schemas
# ============================================================================

class RelayedResponse(BaseModel):
    """Downstream status code and JSON body, passed through untouched."""
    status_code: int
    body: Any = None
