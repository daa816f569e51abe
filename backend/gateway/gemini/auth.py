"""
Credential loading for the Gemini gateway.

Reads the Google OAuth 2.0 credential file once at startup and turns it into
a ``CredentialBundle``. Failures here are fatal to startup.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from gateway.core.errors import CredentialFileError, SerializationError
from gateway.schemas.gemini import CredentialBundle

logger = logging.getLogger(__name__)


def load_credentials_from_file(path: Union[str, Path]) -> CredentialBundle:
    """
    Load Google OAuth credentials from a JSON file.

    Args:
        path: Location of the credential file

    Returns:
        Parsed credential bundle

    Raises:
        CredentialFileError: If the file cannot be read
        SerializationError: If the file is not a valid credential document
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"[CREDENTIALS] Could not read credential file {path}: {e}")
        raise CredentialFileError(f"Could not read credential file {path}", cause=e) from e
    except UnicodeDecodeError as e:
        logger.error(f"[CREDENTIALS] Credential file {path} is not valid UTF-8: {e}")
        raise SerializationError(f"Credential file {path} is not valid UTF-8", cause=e) from e

    try:
        creds_dict = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error(f"[CREDENTIALS] Credential file {path} is not valid JSON: {e}")
        raise SerializationError(f"Credential file {path} is not valid JSON", cause=e) from e

    credentials = load_credentials_from_dict(creds_dict)
    logger.info(f"[CREDENTIALS] Loaded credentials for client {credentials.client_id[:12]}... from {path}")
    return credentials


def load_credentials_from_dict(creds_dict: Any) -> CredentialBundle:
    """
    Load Google OAuth credentials from a dictionary.

    The dictionary should contain:
    - access_token (or token): Current access token
    - refresh_token: Refresh token for obtaining new access tokens
    - client_id: OAuth client ID
    - client_secret: OAuth client secret

    Raises:
        SerializationError: If the document is not an object or a field is missing
    """
    if not isinstance(creds_dict, dict):
        raise SerializationError(
            f"Credential document must be a JSON object, got {type(creds_dict).__name__}"
        )

    normalized = _normalize_credentials(creds_dict)

    try:
        return CredentialBundle.model_validate(normalized)
    except ValidationError as e:
        missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        logger.error(f"[CREDENTIALS] Invalid credential document, bad fields: {missing}")
        raise SerializationError("Invalid credential document", cause=e) from e


def _normalize_credentials(creds_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalize credential dictionary to expected format.

    Google's authorized_user files name the access token ``token``.
    """
    normalized = creds_dict.copy()

    # Handle token vs access_token naming
    if "token" in normalized and "access_token" not in normalized:
        normalized["access_token"] = normalized["token"]

    return normalized
