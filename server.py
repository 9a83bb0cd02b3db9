#!/usr/bin/env python3
"""
Google Drive Folders MCP Server

Path-oriented file management for Google Drive: list folders, write files
to slash-separated paths (creating folders as needed), suggest where
content belongs, search, and read content back.

Architecture:
- validation.py: Pure parameter/path helpers (no API calls)
- adapters/: Thin Google Drive API wrapper (DriveClient)
- tools/: Tool implementations (business logic)
- server.py: Thin MCP wrappers (this file)

The DriveClient is built once in main() and handed to build_server();
tools never reach for a global service.
"""

import os
import signal
import sys
from typing import Any

from google.auth.exceptions import GoogleAuthError
from mcp.server.fastmcp import FastMCP

import tools
from adapters.drive import DriveClient
from adapters.services import get_drive_client
from config import ServerConfig, load_config
from logging_config import configure_logging, logger
from models import DriveError

SERVER_NAME = "Google Drive MCP Server"

OVERVIEW = """# Google Drive MCP Server

Path-oriented tools for Google Drive.

| Tool | Purpose |
|------|---------|
| `list_root_folders` | Folders at the top of My Drive (plus shared folders) |
| `list_files_and_folders` | Children of a folder (default: root) |
| `search_drive_items` | Drive query syntax, all pages |
| `read_file_content` | Text of a file (Docs/Sheets/Slides exported, others downloaded) |
| `create_file_in_path` | Write a file to `Folder/Sub/name.ext`, creating folders |
| `create_docx_file_in_path` | Same, for `.docx` names |
| `update_docx_file_in_path` | Replace the content of an existing `.docx` |
| `suggest_folder_for_content` | Pick (and create) a top-level folder for a name |
| `summarize_content` | Truncated preview of some text |
| `list_tools` | Names of all registered tools |

## Paths

Paths are split on `/`; empty and `.` segments are ignored, so `.` and `/`
mean the root. Folder names match exactly (case-sensitive). Missing
folders are created. If two folders share a name, the first listed wins.

## Errors

Failures come back as `{"error": true, "kind": ..., "message": ...}` with
kind one of `communication_error`, `not_found`, `validation_error`,
`unsupported_type`.
"""


def build_server(client: DriveClient, config: ServerConfig | None = None) -> FastMCP:
    """Create the FastMCP server with every tool bound to client."""
    config = config or ServerConfig()
    mcp = FastMCP(SERVER_NAME, host=config.host, port=config.port)

    # ========================================================================
    # TOOLS (thin wrappers)
    # ========================================================================

    @mcp.tool()
    def list_root_folders() -> dict[str, Any]:
        """
        Fetches the list of root level folders in Google Drive.

        Includes folders shared with the user.

        Returns:
            folders: list of {id, name}
        """
        return tools.list_root_folders(client)

    @mcp.tool()
    def create_file_in_path(path: str, content: str) -> dict[str, Any]:
        """
        Creates a file with the given content in the specified Google Drive path.

        Missing folders along the path are created.

        Args:
            path: The full path including filename (e.g., 'MyFolder/file.txt')
            content: The content of the file

        Returns:
            file_id, file_name
        """
        return tools.create_file_in_path(client, path, content)

    @mcp.tool()
    def create_docx_file_in_path(path: str, content: str) -> dict[str, Any]:
        """
        Creates a .docx file with the given content in the specified Google Drive path.

        Args:
            path: The full path including filename (e.g., 'MyFolder/document.docx')
            content: The content of the file

        Returns:
            file_id, file_name
        """
        return tools.create_docx_file_in_path(client, path, content)

    @mcp.tool()
    def update_docx_file_in_path(path: str, content: str) -> dict[str, Any]:
        """
        Replaces the content of an existing .docx file at the given path.

        Args:
            path: The full path including filename (e.g., 'MyFolder/document.docx')
            content: The new content of the file

        Returns:
            file_id, file_name
        """
        return tools.update_docx_file_in_path(client, path, content)

    @mcp.tool()
    def suggest_folder_for_content(content_name: str) -> dict[str, Any]:
        """
        Suggests a folder based on the content name.

        Keyword match on the name (report → Reports, image/photo → Images,
        document/doc → Documents, code/src → Code, else Miscellaneous).
        The folder is created at the top of My Drive if it doesn't exist.

        Args:
            content_name: The name of the content to suggest a folder for

        Returns:
            suggested_folder_id, suggested_folder_name
        """
        return tools.suggest_folder_for_content(client, content_name)

    @mcp.tool()
    def list_files_and_folders(folder_id: str = "") -> dict[str, Any]:
        """
        Lists files and folders within a specific folder.

        Args:
            folder_id: The ID of the folder to list files and folders from. Defaults to root.

        Returns:
            files: list of {id, name, mime_type}
        """
        return tools.list_files_and_folders(client, folder_id)

    @mcp.tool()
    def search_drive_items(query: str) -> dict[str, Any]:
        """
        Searches for files and folders using Google Drive query syntax.

        Example: "name contains 'Projects'" or
        "mimeType = 'application/vnd.google-apps.folder'". All pages are returned.

        Args:
            query: Drive API search query

        Returns:
            files: list of {id, name, mime_type}
            count: number of matches
        """
        return tools.search_drive_items(client, query)

    @mcp.tool()
    def read_file_content(file_id: str, mime_type: str) -> dict[str, Any]:
        """
        Reads the content of a file, handling different MIME types.

        Google Docs/Slides are exported as plain text and Sheets as CSV.
        .docx, PDF and text/* files are downloaded as-is (binary formats
        come back undecoded).

        Args:
            file_id: Drive file ID
            mime_type: The file's MIME type (from a listing or search)

        Returns:
            content: file content as text
        """
        return tools.read_file_content(client, file_id, mime_type)

    @mcp.tool()
    def summarize_content(content: str) -> dict[str, Any]:
        """
        Returns a short preview of the given text (truncation, not a model summary).

        Args:
            content: Text to summarize

        Returns:
            summary
        """
        return tools.summarize_content(content, config.summary_chars)

    @mcp.tool()
    async def list_tools() -> dict[str, Any]:
        """
        Lists all available tools on the MCP server.

        Returns:
            tools: sorted tool names
        """
        registered = await mcp.list_tools()
        return {"tools": sorted(t.name for t in registered)}

    # ========================================================================
    # RESOURCES
    # ========================================================================

    @mcp.resource("drive://docs/overview")
    def docs_overview() -> str:
        """Overview of the Google Drive MCP server."""
        return OVERVIEW

    return mcp


# ============================================================================
# SERVER ENTRY POINT
# ============================================================================

def _shutdown_handler(signum: int, frame: object) -> None:
    """Handle termination signals by exiting immediately.

    os._exit() is required because sys.exit() raises SystemExit,
    which asyncio's event loop catches and ignores.
    """
    os._exit(0)


def main() -> None:
    try:
        config = load_config()
    except ValueError as e:
        configure_logging()
        logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)
    configure_logging(config.log_level)

    # No Drive client, no server
    try:
        client = get_drive_client()
    except (OSError, ValueError, GoogleAuthError) as e:
        logger.critical(f"Failed to initialize Google Drive service: {e}")
        sys.exit(1)

    try:
        logger.info(f"Drive user email: {client.get_user_email()}")
    except DriveError as e:
        logger.warning(f"About error: {e.message}")

    mcp = build_server(client, config)

    signal.signal(signal.SIGTERM, _shutdown_handler)
    signal.signal(signal.SIGINT, _shutdown_handler)

    if config.transport != "stdio":
        logger.info(f"Starting MCP {config.transport} server on {config.host}:{config.port}")
    mcp.run(transport=config.transport)


if __name__ == "__main__":
    main()
