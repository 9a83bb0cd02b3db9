"""
Create tool implementation.

Writes content to a slash-separated Drive path, creating any missing
parent folders on the way ('Projects/2024/notes.txt' creates Projects and
2024 if needed). The DOCX variants additionally insist on a .docx name
and record the Word MIME type on the file.
"""

import mimetypes
from typing import Any

from adapters.drive import DriveClient, DOCX_MIME
from logging_config import logger
from models import DriveError, FileResult, NotFound, ValidationError
from tools.folders import resolve_or_create
from validation import ensure_extension, require_param, split_file_path

DOCX_EXTENSION = ".docx"


def _guess_mime_type(file_name: str) -> str:
    mime_type, _ = mimetypes.guess_type(file_name)
    return mime_type or "text/plain"


def create_file(client: DriveClient, path: str, content: str) -> FileResult:
    """
    Create a file at path with content.

    Raises:
        ValidationError: path has no file name
        CommunicationError: folder resolution or upload failed
    """
    folders, file_name = split_file_path(path)
    parent_id = resolve_or_create(client, folders)
    item = client.upload_file(
        file_name, parent_id, content.encode("utf-8"), _guess_mime_type(file_name)
    )
    logger.info(f"Created '{path}' ({item.id})")
    return FileResult(file_id=item.id, file_name=item.name or file_name)


def create_docx_file(client: DriveClient, path: str, content: str) -> FileResult:
    """
    Create a .docx file at path.

    The extension is checked before any remote call.

    Raises:
        ValidationError: path has no file name, or it doesn't end in .docx
        CommunicationError: folder resolution or upload failed
    """
    folders, file_name = split_file_path(path)
    ensure_extension(file_name, DOCX_EXTENSION)
    parent_id = resolve_or_create(client, folders)
    item = client.upload_file(
        file_name, parent_id, content.encode("utf-8"), DOCX_MIME, set_mime_type=True
    )
    logger.info(f"Created '{path}' ({item.id})")
    return FileResult(file_id=item.id, file_name=item.name or file_name)


def update_docx_file(client: DriveClient, path: str, content: str) -> FileResult:
    """
    Replace the content of an existing .docx file at path.

    Missing parent folders are still created (matching create), after
    which the lookup of the file itself fails with NotFound.

    Raises:
        ValidationError: path has no file name, or it doesn't end in .docx
        NotFound: no such file in the resolved folder
        CommunicationError: a remote call failed
    """
    folders, file_name = split_file_path(path)
    ensure_extension(file_name, DOCX_EXTENSION)
    parent_id = resolve_or_create(client, folders)

    matches = client.find_files(file_name, parent_id)
    if not matches:
        raise NotFound(
            f"file '{file_name}' not found in parent '{parent_id}'",
            details={"path": path},
        )

    item = client.update_file(matches[0].id, file_name, content.encode("utf-8"), DOCX_MIME)
    logger.info(f"Updated '{path}' ({item.id})")
    return FileResult(file_id=item.id, file_name=item.name or file_name)


# ============================================================================
# TOOL HANDLERS
# ============================================================================

def create_file_in_path(
    client: DriveClient, path: str | None, content: str | None
) -> dict[str, Any]:
    try:
        return create_file(
            client, require_param(path, "path"), _require_content(content)
        ).to_dict()
    except DriveError as e:
        return e.to_dict()


def create_docx_file_in_path(
    client: DriveClient, path: str | None, content: str | None
) -> dict[str, Any]:
    try:
        return create_docx_file(
            client, require_param(path, "path"), _require_content(content)
        ).to_dict()
    except DriveError as e:
        return e.to_dict()


def update_docx_file_in_path(
    client: DriveClient, path: str | None, content: str | None
) -> dict[str, Any]:
    try:
        return update_docx_file(
            client, require_param(path, "path"), _require_content(content)
        ).to_dict()
    except DriveError as e:
        return e.to_dict()


def _require_content(content: str | None) -> str:
    # Empty content is a valid (empty) file; only absence is an error.
    if content is None:
        raise ValidationError("required argument 'content' is missing")
    return content
