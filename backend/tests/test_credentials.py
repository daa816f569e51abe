"""Unit tests for credential loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gateway.core.errors import CredentialFileError, SerializationError
from gateway.gemini.auth import load_credentials_from_dict, load_credentials_from_file

from .conftest import CREDENTIALS


def test_load_credentials_from_file(credentials_file: Path) -> None:
    """Test loading a complete credential file."""
    bundle = load_credentials_from_file(credentials_file)

    assert bundle.access_token == "A"
    assert bundle.refresh_token == "R"
    assert bundle.client_id == "C"
    assert bundle.client_secret == "S"


def test_load_credentials_accepts_token_alias(tmp_path: Path) -> None:
    """Test Google authorized_user files that name the access token 'token'."""
    path = tmp_path / "authorized_user.json"
    path.write_text(
        json.dumps(
            {
                "token": "A",
                "refresh_token": "R",
                "client_id": "C",
                "client_secret": "S",
                "scopes": ["openid"],
                "expiry": "2026-01-01T00:00:00Z",
            }
        ),
        encoding="utf-8",
    )

    bundle = load_credentials_from_file(path)

    assert bundle.access_token == "A"


def test_access_token_wins_over_token_alias() -> None:
    bundle = load_credentials_from_dict({**CREDENTIALS, "token": "other"})

    assert bundle.access_token == "A"


def test_missing_file_raises_credential_file_error(tmp_path: Path) -> None:
    with pytest.raises(CredentialFileError) as exc_info:
        load_credentials_from_file(tmp_path / "missing.json")

    assert exc_info.value.kind == "io"
    assert isinstance(exc_info.value.cause, FileNotFoundError)


def test_invalid_json_raises_serialization_error(tmp_path: Path) -> None:
    path = tmp_path / "oauth.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SerializationError):
        load_credentials_from_file(path)


def test_non_utf8_file_raises_serialization_error(tmp_path: Path) -> None:
    """Test that undecodable bytes are reported as a parse failure."""
    path = tmp_path / "oauth.json"
    path.write_bytes(b'{"access_token": "\xff\xfe"}')

    with pytest.raises(SerializationError) as exc_info:
        load_credentials_from_file(path)

    assert isinstance(exc_info.value.cause, UnicodeDecodeError)


@pytest.mark.parametrize("field", ["access_token", "refresh_token", "client_id", "client_secret"])
def test_missing_field_raises_serialization_error(field: str) -> None:
    """Test that every bundle field is required."""
    creds = {k: v for k, v in CREDENTIALS.items() if k != field}

    with pytest.raises(SerializationError):
        load_credentials_from_dict(creds)


def test_non_object_document_raises_serialization_error() -> None:
    with pytest.raises(SerializationError):
        load_credentials_from_dict(["A", "R", "C", "S"])
