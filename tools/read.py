"""
Read tool implementation.

Routes on the caller-declared MIME type:
- Google-native files can't be downloaded, only exported → export as text
- DOCX, PDF and text/* files → raw download

DOCX and PDF come back as their raw bytes (ZIP / PDF stream) decoded
leniently; no parsing into readable text happens here.
"""

from typing import Any

from adapters.drive import (
    DriveClient,
    GOOGLE_DOC_MIME,
    GOOGLE_SHEET_MIME,
    GOOGLE_SLIDES_MIME,
    DOCX_MIME,
    PDF_MIME,
)
from models import DriveError, UnsupportedType
from validation import require_param

# Google-native type → export format
EXPORT_MIME_TYPES = {
    GOOGLE_DOC_MIME: "text/plain",
    GOOGLE_SHEET_MIME: "text/csv",
    GOOGLE_SLIDES_MIME: "text/plain",
}

# Binary types we download as-is
DOWNLOAD_MIME_TYPES = frozenset({DOCX_MIME, PDF_MIME})


def is_downloadable(mime_type: str) -> bool:
    return mime_type in DOWNLOAD_MIME_TYPES or mime_type.startswith("text/")


def read_content(client: DriveClient, file_id: str, mime_type: str) -> str:
    """
    Fetch a file's content as text.

    Raises:
        UnsupportedType: mime_type is neither exportable nor downloadable
            (checked before any remote call)
        CommunicationError: export/download failed
    """
    export_as = EXPORT_MIME_TYPES.get(mime_type)
    if export_as is not None:
        data = client.export_file(file_id, export_as)
    elif is_downloadable(mime_type):
        data = client.download_file(file_id)
    else:
        raise UnsupportedType(
            f"unsupported mime type for reading: {mime_type}",
            details={"file_id": file_id},
        )

    if isinstance(data, str):
        return data
    return data.decode("utf-8", errors="replace")


def read_file_content(
    client: DriveClient, file_id: str | None, mime_type: str | None
) -> dict[str, Any]:
    """Tool handler: validate, read, shape the payload."""
    try:
        content = read_content(
            client,
            require_param(file_id, "file_id"),
            require_param(mime_type, "mime_type"),
        )
    except DriveError as e:
        return e.to_dict()
    return {"content": content}
