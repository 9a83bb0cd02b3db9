#!/usr/bin/env python3
"""
OAuth Authentication for drive-folders-mcp.

Runs the installed-app consent flow once and writes the token file the
server loads at startup.

Usage:
    python -m auth             # Auto mode (opens browser, local callback)
    python -m auth --manual    # Manual mode (copy-paste redirect URL)

Prerequisites:
    - OAuth client secrets (Desktop app) from the GCP Console, saved as
      credentials.json beside this file or at $DRIVE_MCP_CREDENTIALS_FILE
"""

import argparse
import os
import sys
from urllib.parse import parse_qs, urlparse

from google_auth_oauthlib.flow import InstalledAppFlow

from oauth_config import (
    CREDENTIALS_FILE,
    TOKEN_FILE,
    SCOPES,
    OAUTH_PORT,
)


def _is_interactive() -> bool:
    """Check if we're running in an interactive terminal with a display."""
    return sys.stdin.isatty() and bool(
        os.environ.get("DISPLAY", os.environ.get("WAYLAND_DISPLAY", ""))
    )


def _extract_code(value: str) -> str:
    """Accept either a bare authorization code or the full redirect URL."""
    value = value.strip()
    if value.startswith("http://") or value.startswith("https://"):
        codes = parse_qs(urlparse(value).query).get("code")
        if not codes:
            raise ValueError("redirect URL has no 'code' parameter")
        return codes[0]
    return value


def authenticate(manual: bool, code: str | None = None) -> None:
    flow = InstalledAppFlow.from_client_secrets_file(str(CREDENTIALS_FILE), SCOPES)

    if manual:
        flow.redirect_uri = f"http://localhost:{OAUTH_PORT}/"
        auth_url, _ = flow.authorization_url(access_type="offline", prompt="consent")
        if code is None:
            print("Go to the following link in your browser:")
            print()
            print(f"    {auth_url}")
            print()
            print("After approving, the browser lands on a localhost page that won't load.")
            code = input("Paste that page's full URL (or just the code): ")
        flow.fetch_token(code=_extract_code(code))
        creds = flow.credentials
    else:
        creds = flow.run_local_server(port=OAUTH_PORT, access_type="offline", prompt="consent")

    TOKEN_FILE.parent.mkdir(parents=True, exist_ok=True)
    TOKEN_FILE.write_text(creds.to_json())
    os.chmod(TOKEN_FILE, 0o600)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="OAuth authentication for drive-folders-mcp"
    )
    parser.add_argument(
        '--manual',
        action='store_true',
        help='Manual mode: copy-paste OAuth flow (for remote/SSH hosts)'
    )
    parser.add_argument(
        '--code',
        type=str,
        help='Authorization code or redirect URL (non-interactive)'
    )

    args = parser.parse_args()

    if not CREDENTIALS_FILE.exists():
        print(f"Error: {CREDENTIALS_FILE} not found")
        print("Download OAuth client secrets (Desktop app) from the GCP Console,")
        print("or point DRIVE_MCP_CREDENTIALS_FILE at them.")
        sys.exit(1)

    # Default to manual mode if no display available
    manual = args.manual or bool(args.code)
    if not manual and not _is_interactive():
        print("No display detected: using manual mode.")
        manual = True

    try:
        authenticate(manual, args.code)
        print()
        print(f"Authentication complete. {TOKEN_FILE} created.")
    except KeyboardInterrupt:
        print("\n\nAuthentication cancelled")
        sys.exit(1)
    except Exception as e:
        print(f"\nAuthentication failed: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
