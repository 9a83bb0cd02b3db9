#!/usr/bin/env python3
"""
CLI interface for drive-folders-mcp.

Usage:
    drive-folders roots
    drive-folders ls [FOLDER_ID]
    drive-folders search "name contains 'Projects'"
    drive-folders read FILE_ID MIME_TYPE
    drive-folders create "Projects/2024/notes.txt" --content "hello"
    drive-folders suggest "Quarterly Report.pdf"

This provides the same functionality as the MCP tools but via command line.
Output is the same JSON payload the tool would return; errors exit 1.
"""

import argparse
import json
import sys
from typing import Any

from google.auth.exceptions import GoogleAuthError

import tools
from adapters.drive import DriveClient
from adapters.services import get_drive_client
from config import LOG_LEVELS
from logging_config import configure_logging


def _read_content(args: argparse.Namespace) -> str:
    # Read from stdin if no --content provided
    return args.content if args.content is not None else sys.stdin.read()


def cmd_roots(client: DriveClient, args: argparse.Namespace) -> dict[str, Any]:
    """List root-level folders."""
    return tools.list_root_folders(client)


def cmd_ls(client: DriveClient, args: argparse.Namespace) -> dict[str, Any]:
    """List a folder's children."""
    return tools.list_files_and_folders(client, args.folder_id)


def cmd_search(client: DriveClient, args: argparse.Namespace) -> dict[str, Any]:
    """Search with Drive query syntax."""
    return tools.search_drive_items(client, args.query)


def cmd_read(client: DriveClient, args: argparse.Namespace) -> dict[str, Any]:
    """Read a file's content."""
    return tools.read_file_content(client, args.file_id, args.mime_type)


def cmd_create(client: DriveClient, args: argparse.Namespace) -> dict[str, Any]:
    """Create a file at a path."""
    content = _read_content(args)
    if args.docx:
        return tools.create_docx_file_in_path(client, args.path, content)
    return tools.create_file_in_path(client, args.path, content)


def cmd_update_docx(client: DriveClient, args: argparse.Namespace) -> dict[str, Any]:
    """Replace an existing .docx file's content."""
    return tools.update_docx_file_in_path(client, args.path, _read_content(args))


def cmd_suggest(client: DriveClient, args: argparse.Namespace) -> dict[str, Any]:
    """Suggest a folder for a content name."""
    return tools.suggest_folder_for_content(client, args.content_name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Google Drive path-oriented file management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    drive-folders roots
    drive-folders ls 1abc123def456
    drive-folders search "name contains 'budget'"
    drive-folders read 1abc123def456 application/vnd.google-apps.document
    drive-folders create "Reports/2024/q1.txt" --content "Q1 numbers"
    echo "draft" | drive-folders create "Docs/draft.docx" --docx
    drive-folders suggest "holiday photo.jpg"
""",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    roots_p = subparsers.add_parser("roots", help="List root-level folders")
    roots_p.set_defaults(func=cmd_roots)

    ls_p = subparsers.add_parser("ls", help="List files and folders in a folder")
    ls_p.add_argument("folder_id", nargs="?", default=None, help="Folder ID (default: root)")
    ls_p.set_defaults(func=cmd_ls)

    search_p = subparsers.add_parser("search", help="Search Drive")
    search_p.add_argument("query", help="Drive query, e.g. \"name contains 'x'\"")
    search_p.set_defaults(func=cmd_search)

    read_p = subparsers.add_parser("read", help="Read file content")
    read_p.add_argument("file_id", help="Drive file ID")
    read_p.add_argument("mime_type", help="The file's MIME type")
    read_p.set_defaults(func=cmd_read)

    create_p = subparsers.add_parser("create", help="Create a file at a path")
    create_p.add_argument("path", help="Full path including file name")
    create_p.add_argument("--content", help="File content (or read from stdin)")
    create_p.add_argument("--docx", action="store_true", help="Create as .docx")
    create_p.set_defaults(func=cmd_create)

    update_p = subparsers.add_parser("update-docx", help="Replace a .docx file's content")
    update_p.add_argument("path", help="Full path including file name")
    update_p.add_argument("--content", help="New content (or read from stdin)")
    update_p.set_defaults(func=cmd_update_docx)

    suggest_p = subparsers.add_parser("suggest", help="Suggest a folder for content")
    suggest_p.add_argument("content_name", help="Name of the content")
    suggest_p.set_defaults(func=cmd_suggest)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        client = get_drive_client()
    except (OSError, ValueError, GoogleAuthError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    result = args.func(client, args)
    print(json.dumps(result, indent=2))
    if result.get("error"):
        sys.exit(1)


if __name__ == "__main__":
    main()
