"""
Configuration settings for the gateway.
"""
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings

from gateway.gemini.config import (
    DEFAULT_GEMINI_API_BASE,
    DEFAULT_GEMINI_MODEL,
    TOKEN_URI as DEFAULT_TOKEN_URI,
    USERINFO_URL as DEFAULT_USERINFO_URL,
)

# Load environment variables from .env file if it exists
env_path = Path(__file__).resolve().parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """
    # Listener
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000

    # Credential bundle read once at startup
    CREDENTIALS_FILE: str = "oauth.json"

    # Upstream Google endpoints
    TOKEN_URI: str = DEFAULT_TOKEN_URI
    USERINFO_URL: str = DEFAULT_USERINFO_URL
    GEMINI_API_BASE: str = DEFAULT_GEMINI_API_BASE
    GEMINI_MODEL: str = DEFAULT_GEMINI_MODEL

    # Outbound HTTP client; None disables timeouts entirely
    HTTP_TIMEOUT_SECONDS: Optional[float] = None

    # Token refresh policy
    REFRESH_EVERY_REQUEST: bool = True
    TOKEN_EXPIRY_MARGIN_SECONDS: float = 60.0

    LOG_LEVEL: str = "INFO"

    @field_validator("HTTP_TIMEOUT_SECONDS", mode="before")
    def parse_timeout(cls, v):
        """
        Treat empty strings and 'none' from the environment as no timeout.
        """
        if isinstance(v, str) and v.strip().lower() in ("", "none", "null"):
            return None
        return v

    @field_validator("GEMINI_API_BASE")
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("LOG_LEVEL")
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    class Config:
        """Config for the BaseSettings class."""
        env_file = ".env"
        case_sensitive = True
        extra = 'ignore'  # Ignore extra fields from environment


# Create settings object
settings = Settings()
