"""
Helper functions for outbound Google API requests.
"""
import json
import platform
from typing import Any, Dict

from gateway.core.version import API_VERSION


def get_user_agent() -> str:
    """
    User agent sent on every proxied request.

    Format: GeminiOAuthGateway/{version} ({platform}; {arch})
    """
    os_name = platform.system().lower()
    arch = platform.machine().lower()

    if arch in ["amd64", "x86_64"]:
        arch = "x64"
    elif arch in ["arm64", "aarch64"]:
        arch = "arm64"

    return f"GeminiOAuthGateway/{API_VERSION} ({os_name}; {arch})"


def build_request_headers(access_token: str) -> Dict[str, str]:
    """
    Build HTTP headers for bearer-authenticated Google API requests.

    Args:
        access_token: Valid OAuth access token

    Returns:
        Dictionary of headers
    """
    return {
        "Authorization": f"Bearer {access_token}",
        "User-Agent": get_user_agent(),
    }


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name}")


def parse_json_body(content: bytes) -> Any:
    """
    Parse a response body as strict JSON.

    NaN and Infinity are rejected, since they could not be relayed back
    to the caller as JSON.

    Raises:
        ValueError: If the body is not valid JSON
    """
    return json.loads(content, parse_constant=_reject_constant)
