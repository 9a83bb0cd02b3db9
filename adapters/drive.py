"""
Drive adapter: Google Drive API wrapper.

DriveClient wraps one authenticated Drive v3 Resource. It owns the Drive
query syntax and field masks; tools own the semantics (not-found handling,
path resolution, payload shapes).

Every public method raises CommunicationError on remote failure.
"""

import io
from typing import Any

from googleapiclient.discovery import Resource
from googleapiclient.http import MediaIoBaseUpload

from api_errors import translate_errors
from logging_config import log_api_call, log_api_result
from models import DriveItem
from validation import escape_query_value


# Common MIME types for reference
GOOGLE_FOLDER_MIME = "application/vnd.google-apps.folder"
GOOGLE_DOC_MIME = "application/vnd.google-apps.document"
GOOGLE_SHEET_MIME = "application/vnd.google-apps.spreadsheet"
GOOGLE_SLIDES_MIME = "application/vnd.google-apps.presentation"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PDF_MIME = "application/pdf"

ROOT_FOLDER_ID = "root"

# Listings only need id, name and mimeType
ITEM_FIELDS = "id,name,mimeType"
LIST_FIELDS = f"nextPageToken,files({ITEM_FIELDS})"
LIST_PAGE_SIZE = 100


class DriveClient:
    """
    Thin, stateless wrapper around an authenticated Drive v3 service.

    Safe to share between handlers: it holds no per-request state.
    """

    def __init__(self, service: Resource):
        self._service = service

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def _list_page(self, query: str, page_token: str | None = None) -> dict[str, Any]:
        kwargs: dict[str, Any] = dict(
            q=query,
            pageSize=LIST_PAGE_SIZE,
            fields=LIST_FIELDS,
            supportsAllDrives=True,
            includeItemsFromAllDrives=True,
        )
        if page_token:
            kwargs["pageToken"] = page_token
        log_api_call("files.list", q=query, pageToken=page_token)
        response = self._service.files().list(**kwargs).execute()
        log_api_result("files.list", len(response.get("files", [])))
        return response

    @translate_errors("list files")
    def list_items(self, query: str) -> list[DriveItem]:
        """One page of results for a Drive query. No pagination."""
        response = self._list_page(query)
        return [DriveItem.from_api(f) for f in response.get("files", [])]

    @translate_errors("search drive items")
    def list_all_items(self, query: str) -> list[DriveItem]:
        """All results for a Drive query, following nextPageToken until empty."""
        items: list[DriveItem] = []
        page_token = None
        while True:
            response = self._list_page(query, page_token)
            items.extend(DriveItem.from_api(f) for f in response.get("files", []))
            page_token = response.get("nextPageToken")
            if not page_token:
                return items

    def list_root_folders(self) -> list[DriveItem]:
        """Folders in My Drive root, plus folders shared with the user."""
        query = (
            f"('{ROOT_FOLDER_ID}' in parents or sharedWithMe = true) "
            f"and mimeType = '{GOOGLE_FOLDER_MIME}' and trashed = false"
        )
        return self.list_items(query)

    def list_children(self, folder_id: str) -> list[DriveItem]:
        """Direct children (files and folders) of folder_id."""
        query = f"'{escape_query_value(folder_id)}' in parents and trashed = false"
        return self.list_items(query)

    def find_folders(self, name: str, parent_id: str) -> list[DriveItem]:
        """Folders named exactly `name` directly under parent_id."""
        query = (
            f"'{escape_query_value(parent_id)}' in parents "
            f"and name = '{escape_query_value(name)}' "
            f"and mimeType = '{GOOGLE_FOLDER_MIME}' and trashed = false"
        )
        return self.list_items(query)

    def find_files(self, name: str, parent_id: str) -> list[DriveItem]:
        """Non-folder files named exactly `name` directly under parent_id."""
        query = (
            f"'{escape_query_value(parent_id)}' in parents "
            f"and name = '{escape_query_value(name)}' "
            f"and mimeType != '{GOOGLE_FOLDER_MIME}' and trashed = false"
        )
        return self.list_items(query)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    @translate_errors("create folder")
    def create_folder(self, name: str, parent_id: str) -> str:
        """Create a folder under parent_id and return its ID."""
        body = {"name": name, "mimeType": GOOGLE_FOLDER_MIME, "parents": [parent_id]}
        log_api_call("files.create", name=name, parent=parent_id, mimeType=GOOGLE_FOLDER_MIME)
        folder = (
            self._service.files()
            .create(body=body, fields="id", supportsAllDrives=True)
            .execute()
        )
        log_api_result("files.create")
        return folder["id"]

    @translate_errors("create file")
    def upload_file(
        self,
        name: str,
        parent_id: str,
        content: bytes,
        mime_type: str,
        set_mime_type: bool = False,
    ) -> DriveItem:
        """
        Upload a new file under parent_id.

        Args:
            name: File name
            parent_id: Destination folder ID
            content: Raw bytes
            mime_type: MIME type of the uploaded media
            set_mime_type: Also record mime_type on the file metadata
                (otherwise Drive infers it from the media)
        """
        body: dict[str, Any] = {"name": name, "parents": [parent_id]}
        if set_mime_type:
            body["mimeType"] = mime_type
        media = MediaIoBaseUpload(io.BytesIO(content), mimetype=mime_type, resumable=False)
        log_api_call("files.create", name=name, parent=parent_id, mimeType=mime_type)
        result = (
            self._service.files()
            .create(body=body, media_body=media, fields=ITEM_FIELDS, supportsAllDrives=True)
            .execute()
        )
        log_api_result("files.create")
        return DriveItem.from_api(result)

    @translate_errors("update file")
    def update_file(self, file_id: str, name: str, content: bytes, mime_type: str) -> DriveItem:
        """Replace a file's content, keeping its name and setting mime_type."""
        body = {"name": name, "mimeType": mime_type}
        media = MediaIoBaseUpload(io.BytesIO(content), mimetype=mime_type, resumable=False)
        log_api_call("files.update", fileId=file_id, mimeType=mime_type)
        result = (
            self._service.files()
            .update(
                fileId=file_id,
                body=body,
                media_body=media,
                fields=ITEM_FIELDS,
                supportsAllDrives=True,
            )
            .execute()
        )
        log_api_result("files.update")
        return DriveItem.from_api(result)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    @translate_errors("export file")
    def export_file(self, file_id: str, mime_type: str) -> bytes:
        """Export a Google-native file (Docs/Sheets/Slides) to mime_type."""
        log_api_call("files.export", fileId=file_id, mimeType=mime_type)
        result = self._service.files().export(fileId=file_id, mimeType=mime_type).execute()
        log_api_result("files.export")
        return result

    @translate_errors("download file")
    def download_file(self, file_id: str) -> bytes:
        """Download the raw bytes of a non-native file."""
        log_api_call("files.get_media", fileId=file_id)
        result = (
            self._service.files()
            .get_media(fileId=file_id, supportsAllDrives=True)
            .execute()
        )
        log_api_result("files.get_media")
        return result

    @translate_errors("read account details")
    def get_user_email(self) -> str | None:
        """Email address of the authenticated user."""
        about = self._service.about().get(fields="user(emailAddress)").execute()
        return about.get("user", {}).get("emailAddress")
