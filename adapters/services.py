"""
Google Drive service initialization.

Loads token.json, refreshes it if needed, and builds the Drive v3 service.
Called once at startup; the resulting DriveClient is passed explicitly to
every tool handler instead of living in a module-level cache.

All HTTP calls use a 60-second timeout to prevent indefinite hangs
when Google APIs are slow or network connections stall.
"""

from pathlib import Path

import google_auth_httplib2
import httplib2
from google.auth.exceptions import RefreshError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build, Resource

from adapters.drive import DriveClient
from logging_config import logger
from oauth_config import TOKEN_FILE, SCOPES

__all__ = [
    "load_credentials",
    "build_drive_service",
    "get_drive_client",
]

# Default timeout for all Google API calls (seconds)
API_TIMEOUT = 60


def load_credentials(token_file: Path = TOKEN_FILE) -> Credentials:
    """
    Load OAuth credentials from token.json, refreshing an expired access token.

    Raises:
        FileNotFoundError: If the token file is missing or unusable
        RefreshError: If the refresh token has been revoked
    """
    if not token_file.exists():
        raise FileNotFoundError(
            f"{token_file} not found. Run: python -m auth"
        )

    creds = Credentials.from_authorized_user_file(str(token_file), SCOPES)

    if not creds.valid:
        if not (creds.expired and creds.refresh_token):
            raise FileNotFoundError(
                f"{token_file} holds no usable credentials. Run: python -m auth"
            )
        logger.info("Access token expired, refreshing")
        creds.refresh(google_auth_httplib2.Request(httplib2.Http(timeout=API_TIMEOUT)))
        token_file.write_text(creds.to_json())

    return creds


def _get_authorized_http(creds: Credentials) -> google_auth_httplib2.AuthorizedHttp:
    """Create authorized HTTP client with timeout."""
    http = httplib2.Http(timeout=API_TIMEOUT)
    return google_auth_httplib2.AuthorizedHttp(creds, http=http)


def build_drive_service(creds: Credentials) -> Resource:
    """Build an authenticated Google Drive v3 service."""
    return build(
        "drive", "v3",
        http=_get_authorized_http(creds),
        cache_discovery=False,
    )


def get_drive_client(token_file: Path = TOKEN_FILE) -> DriveClient:
    """
    Build the long-lived DriveClient used by all handlers.

    Raises:
        FileNotFoundError, RefreshError: Credentials can't be obtained.
        Callers at startup treat this as fatal.
    """
    try:
        creds = load_credentials(token_file)
    except RefreshError as e:
        raise RefreshError(
            f"Refresh token rejected ({e}). Re-run: python -m auth"
        ) from e
    return DriveClient(build_drive_service(creds))
