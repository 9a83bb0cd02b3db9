"""
Tools: MCP tool implementations.

Each tool has its own module with the implementation logic.
server.py provides thin @mcp.tool() wrappers that call into these,
passing the DriveClient built at startup.

Every handler returns a plain dict: the success payload, or
{"error": True, "kind": ..., "message": ...}. They never raise DriveError.
"""

from .folders import list_root_folders, list_files_and_folders, resolve_or_create, find_folder_id
from .create import create_file_in_path, create_docx_file_in_path, update_docx_file_in_path
from .suggest import suggest_folder_for_content, pick_folder_name, SUGGESTION_RULES
from .search import search_drive_items
from .read import read_file_content
from .summarize import summarize_content

__all__ = [
    "list_root_folders", "list_files_and_folders", "resolve_or_create", "find_folder_id",
    "create_file_in_path", "create_docx_file_in_path", "update_docx_file_in_path",
    "suggest_folder_for_content", "pick_folder_name", "SUGGESTION_RULES",
    "search_drive_items", "read_file_content", "summarize_content",
]
