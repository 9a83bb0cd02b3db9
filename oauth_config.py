"""
OAuth Configuration - Single Source of Truth

All OAuth parameters defined here. Do not duplicate elsewhere.
Paths can be overridden from the environment so the server works
inside a container with mounted secrets.
"""

import os
from pathlib import Path

# Package root (where this file lives)
_PACKAGE_ROOT = Path(__file__).parent

# Full Drive scope: the server creates folders anywhere in the tree,
# not only files it created itself (drive.file would hide existing folders).
SCOPES = [
    'https://www.googleapis.com/auth/drive',
]

# OAuth server port (localhost callback receiver)
OAUTH_PORT = int(os.environ.get('DRIVE_MCP_OAUTH_PORT', 3000))

# OAuth client secrets downloaded from the GCP Console
CREDENTIALS_FILE = Path(
    os.environ.get('DRIVE_MCP_CREDENTIALS_FILE', _PACKAGE_ROOT / 'credentials.json')
)

# Local token storage (user's OAuth tokens, not shared)
# Absolute path so it works regardless of cwd when MCP runs
TOKEN_FILE = Path(
    os.environ.get('DRIVE_MCP_TOKEN_FILE', _PACKAGE_ROOT / 'token.json')
)
