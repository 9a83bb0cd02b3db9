"""
Folder tools: listing, lookup, and path resolution with implicit creation.

resolve_or_create() is the shared primitive behind file creation and
folder suggestion: walk a slash-separated path from the root, descending
into existing folders and creating the missing ones.
"""

from typing import Any, Sequence

from adapters.drive import DriveClient, ROOT_FOLDER_ID
from logging_config import logger
from models import DriveError, NotFound
from validation import normalize_segments, split_folder_path


def find_folder_id(client: DriveClient, name: str, parent_id: str = ROOT_FOLDER_ID) -> str:
    """
    Find a folder by exact (case-sensitive) name directly under parent_id.

    Drive doesn't enforce unique names per parent; when several folders
    share the name, the first one listed wins.

    Raises:
        NotFound: No folder with that name under parent_id
        CommunicationError: The listing failed
    """
    folders = client.find_folders(name, parent_id)
    if not folders:
        raise NotFound(f"folder '{name}' not found", details={"parent_id": parent_id})
    return folders[0].id


def resolve_or_create(client: DriveClient, path: str | Sequence[str]) -> str:
    """
    Return the ID of the deepest folder in path, creating missing segments.

    Args:
        client: Authenticated Drive client
        path: Slash-separated string ('Projects/2024') or a sequence of
            segment names. '', '.', '/' and [] all mean the root.

    Returns:
        Folder ID of the last segment ('root' for an empty path)

    Raises:
        CommunicationError: A listing or creation call failed (no retry)
    """
    segments = split_folder_path(path) if isinstance(path, str) else normalize_segments(path)

    parent_id = ROOT_FOLDER_ID
    for segment in segments:
        try:
            parent_id = find_folder_id(client, segment, parent_id)
        except NotFound:
            new_id = client.create_folder(segment, parent_id)
            logger.info(f"Created folder '{segment}' ({new_id}) under {parent_id}")
            parent_id = new_id
    return parent_id


# ============================================================================
# TOOL HANDLERS
# ============================================================================

def list_root_folders(client: DriveClient) -> dict[str, Any]:
    """Folders at the top of My Drive plus folders shared with the user."""
    try:
        folders = client.list_root_folders()
    except DriveError as e:
        return e.to_dict()
    return {"folders": [{"id": f.id, "name": f.name} for f in folders]}


def list_files_and_folders(client: DriveClient, folder_id: str | None = None) -> dict[str, Any]:
    """
    Direct children of a folder (single page, not recursive).

    Args:
        folder_id: Folder to list. Blank or omitted means the root.
    """
    if not folder_id or not folder_id.strip():
        folder_id = ROOT_FOLDER_ID
    try:
        items = client.list_children(folder_id)
    except DriveError as e:
        return e.to_dict()
    return {"files": [item.to_dict() for item in items]}
