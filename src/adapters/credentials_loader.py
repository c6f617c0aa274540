"""Credential file loader.

Format:
    {"user": "<username>", "token": "<api-token-or-password>"}

Failures map to distinct exceptions:
- unreadable file -> `CredentialsFileError`
- not JSON -> `InvalidCredentialsJSONError`
- missing/non-string `user` or `token` -> `MissingCredentialFieldError`
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from core.domain.models import Credentials
from core.errors import (
    CredentialsFileError,
    InvalidCredentialsJSONError,
    MissingCredentialFieldError,
)

logger = logging.getLogger(__name__)


def read_file_contents(path: Path) -> bytes:
    """Reads the whole file into memory."""

    try:
        return path.read_bytes()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise CredentialsFileError(f"Couldn't open credentials file: {reason}") from exc


def _require_string(document: Any, key: str) -> str:
    value = document.get(key) if isinstance(document, dict) else None
    if not isinstance(value, str):
        raise MissingCredentialFieldError(key)
    return value


def parse_credentials(content: bytes | str) -> Credentials:
    """Parses `user` and `token` out of a JSON document."""

    try:
        document = json.loads(content)
    except (ValueError, RecursionError) as exc:
        raise InvalidCredentialsJSONError("Credentials file doesn't contain valid JSON") from exc

    user = _require_string(document, "user")
    token = _require_string(document, "token")
    return Credentials(user=user, token=token)


def load_credentials(path: Path) -> Credentials:
    credentials = parse_credentials(read_file_contents(path))
    logger.debug("Loaded credentials for user %r from %s", credentials.user, path)
    return credentials
