"""
Default endpoints for the Google services the gateway sits in front of.

These are only defaults; every value can be overridden through
``gateway.core.config.Settings``.
"""

# Token endpoint for OAuth 2.0
TOKEN_URI = "https://oauth2.googleapis.com/token"

# OpenID Connect identity endpoint
USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"

# Generative Language API
DEFAULT_GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1"
DEFAULT_GEMINI_MODEL = "gemini-2.5-pro"

# Grant used when exchanging the refresh token
REFRESH_GRANT_TYPE = "refresh_token"


def get_generate_content_url(api_base: str, model_id: str) -> str:
    """
    Build the generateContent URL for a model.

    Accepts model ids with or without the ``models/`` prefix.

    Args:
        api_base: API base URL (e.g., 'https://generativelanguage.googleapis.com/v1')
        model_id: Model identifier (e.g., 'gemini-2.5-pro')

    Returns:
        Full generateContent URL
    """
    if model_id.startswith("models/"):
        model_id = model_id[7:]
    return f"{api_base.rstrip('/')}/models/{model_id}:generateContent"
