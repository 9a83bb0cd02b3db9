"""
Shared test helpers for drive-folders-mcp.

Centralizes mock wiring patterns that repeat across test files.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock, seal

from adapters.drive import DriveClient
from models import DriveItem


def mock_api_chain(
    mock_service: MagicMock,
    chain: str,
    response: Any = None,
    *,
    side_effect: Any = None,
) -> MagicMock:
    """Set up a mock Google API response for a chained call.

    Navigates the MagicMock attribute chain and sets return_value (or side_effect)
    on the final method. Returns the final mock method for adding assertions.

    Args:
        mock_service: The mocked service object
        chain: Dot-separated chain. Each part except the last is treated as
               a callable method (traversed via .return_value).
               Examples: "files.list.execute", "files.create.execute"
        response: The return value for the final method
        side_effect: Alternative to response: sets side_effect instead

    Examples:
        mock_api_chain(service, "files.list.execute", {"files": []})
        # equivalent to: service.files().list().execute.return_value = {"files": []}
    """
    parts = chain.split(".")
    obj = mock_service
    for part in parts[:-1]:
        obj = getattr(obj, part).return_value
    final = getattr(obj, parts[-1])
    if side_effect is not None:
        final.side_effect = side_effect
    elif response is not None:
        final.return_value = response
    return final


def seal_service(mock_service: MagicMock) -> None:
    """Seal a mock service after all mock_api_chain() calls.

    Prevents MagicMock from silently creating new attributes when
    production code renames an API method.

    Must be called AFTER all mock_api_chain() calls for this service.
    """
    seal(mock_service)


class FolderTree:
    """In-memory stand-in for the folder part of Drive, behind a DriveClient mock.

    existing maps (parent_id, name) → folder_id. Folders created through
    the mock are added to the tree as "new-<n>" and recorded in `created`
    as (name, parent_id, new_id), in call order.

    Usage:
        tree = FolderTree({("root", "Projects"): "f1"})
        resolve_or_create(tree.client, "Projects/2024")
        assert tree.created == [("2024", "f1", "new-1")]
    """

    def __init__(self, existing: dict[tuple[str, str], str] | None = None):
        self.folders: dict[tuple[str, str], list[str]] = {
            key: [folder_id] for key, folder_id in (existing or {}).items()
        }
        self.created: list[tuple[str, str, str]] = []
        self.client = MagicMock(spec=DriveClient)
        self.client.find_folders.side_effect = self._find_folders
        self.client.create_folder.side_effect = self._create_folder

    def add_duplicate(self, parent_id: str, name: str, folder_id: str) -> None:
        self.folders.setdefault((parent_id, name), []).append(folder_id)

    def _find_folders(self, name: str, parent_id: str) -> list[DriveItem]:
        ids = self.folders.get((parent_id, name), [])
        return [DriveItem(id=i, name=name, mime_type="application/vnd.google-apps.folder") for i in ids]

    def _create_folder(self, name: str, parent_id: str) -> str:
        new_id = f"new-{len(self.created) + 1}"
        self.folders.setdefault((parent_id, name), []).append(new_id)
        self.created.append((name, parent_id, new_id))
        return new_id
