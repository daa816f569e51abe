"""
API endpoint for server liveness and version information.

Neither route touches the token store or makes outbound calls.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from gateway.api.dependencies import get_settings
from gateway.core.config import Settings
from gateway.core.version import API_VERSION

router = APIRouter(
    tags=["server"],
)


class HealthResponse(BaseModel):
    """Liveness response."""
    status: str = Field("ok", description="Always 'ok' while the process serves")
    version: str = Field(..., description="Server version (semantic versioning)")


class VersionResponse(BaseModel):
    """Version and active runtime configuration."""
    version: str = Field(..., description="Server version (semantic versioning)")
    model: str = Field(..., description="Gemini model used by /generate")
    refresh_every_request: bool = Field(..., description="Whether every request refreshes the token")


@router.get("/health", response_model=HealthResponse)
async def health():
    """Liveness check."""
    return HealthResponse(status="ok", version=API_VERSION)


@router.get("/version", response_model=VersionResponse)
async def version(settings: Settings = Depends(get_settings)):
    """Version and the refresh policy in effect."""
    return VersionResponse(
        version=API_VERSION,
        model=settings.GEMINI_MODEL,
        refresh_every_request=settings.REFRESH_EVERY_REQUEST,
    )
