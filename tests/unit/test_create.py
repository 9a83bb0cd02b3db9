"""Tests for create/update tools."""

from unittest.mock import MagicMock

import pytest

from adapters.drive import DOCX_MIME
from models import CommunicationError, DriveItem
from tests.helpers import FolderTree
from tools.create import (
    create_docx_file_in_path,
    create_file_in_path,
    update_docx_file_in_path,
)


def _tree_with_uploads(existing=None) -> FolderTree:
    tree = FolderTree(existing)
    tree.client.upload_file.side_effect = (
        lambda name, parent_id, content, mime_type, set_mime_type=False:
        DriveItem(id=f"file-in-{parent_id}", name=name, mime_type=mime_type)
    )
    return tree


class TestCreateFileInPath:

    def test_creates_in_existing_folder(self) -> None:
        tree = _tree_with_uploads({("root", "Notes"): "n1"})

        result = create_file_in_path(tree.client, "Notes/todo.txt", "buy milk")

        assert result == {"file_id": "file-in-n1", "file_name": "todo.txt"}
        assert tree.created == []
        tree.client.upload_file.assert_called_once_with(
            "todo.txt", "n1", b"buy milk", "text/plain"
        )

    def test_creates_missing_folders_first(self) -> None:
        tree = _tree_with_uploads({("root", "Projects"): "p1"})

        result = create_file_in_path(tree.client, "Projects/2024/plan.md", "# Plan")

        assert tree.created == [("2024", "p1", "new-1")]
        assert result["file_id"] == "file-in-new-1"

    def test_bare_file_name_goes_to_root(self) -> None:
        tree = _tree_with_uploads()

        result = create_file_in_path(tree.client, "readme.txt", "hi")

        assert result["file_id"] == "file-in-root"
        tree.client.find_folders.assert_not_called()

    def test_mime_type_guessed_from_name(self) -> None:
        tree = _tree_with_uploads()

        create_file_in_path(tree.client, "data.csv", "a,b")

        assert tree.client.upload_file.call_args.args[3] == "text/csv"

    def test_unknown_extension_uploads_as_text(self) -> None:
        tree = _tree_with_uploads()

        create_file_in_path(tree.client, "file.zzunknown", "x")

        assert tree.client.upload_file.call_args.args[3] == "text/plain"

    def test_empty_content_is_allowed(self) -> None:
        tree = _tree_with_uploads()

        result = create_file_in_path(tree.client, "empty.txt", "")

        assert result["file_name"] == "empty.txt"
        assert tree.client.upload_file.call_args.args[2] == b""

    @pytest.mark.parametrize("path", [None, "", "   "])
    def test_missing_path(self, mock_client, path) -> None:
        result = create_file_in_path(mock_client, path, "content")

        assert result["kind"] == "validation_error"
        assert "path" in result["message"]
        mock_client.upload_file.assert_not_called()

    def test_path_without_file_name(self, mock_client) -> None:
        result = create_file_in_path(mock_client, "/./", "content")

        assert result["kind"] == "validation_error"
        mock_client.upload_file.assert_not_called()

    def test_missing_content(self, mock_client) -> None:
        result = create_file_in_path(mock_client, "a.txt", None)

        assert result["kind"] == "validation_error"
        assert "content" in result["message"]

    def test_upload_failure(self) -> None:
        tree = FolderTree()
        tree.client.upload_file.side_effect = CommunicationError("unable to create file")

        result = create_file_in_path(tree.client, "a.txt", "x")

        assert result == {
            "error": True,
            "kind": "communication_error",
            "message": "unable to create file",
        }


class TestCreateDocxFileInPath:

    def test_creates_with_docx_mime(self) -> None:
        tree = _tree_with_uploads({("root", "Docs"): "d1"})

        result = create_docx_file_in_path(tree.client, "Docs/letter.docx", "Dear...")

        assert result == {"file_id": "file-in-d1", "file_name": "letter.docx"}
        tree.client.upload_file.assert_called_once_with(
            "letter.docx", "d1", b"Dear...", DOCX_MIME, set_mime_type=True
        )

    def test_extension_is_case_insensitive(self) -> None:
        tree = _tree_with_uploads()

        result = create_docx_file_in_path(tree.client, "LETTER.DOCX", "x")

        assert result["file_name"] == "LETTER.DOCX"

    @pytest.mark.parametrize("path", [
        "Docs/letter.txt",
        "Docs/letter.doc",
        "Docs/letter.docx.bak",
        "Docs.docx/letter",
    ])
    def test_rejects_wrong_extension_without_remote_calls(self, path) -> None:
        client = MagicMock()

        result = create_docx_file_in_path(client, path, "x")

        assert result["error"] is True
        assert result["kind"] == "validation_error"
        assert ".docx" in result["message"]
        assert client.mock_calls == []


class TestUpdateDocxFileInPath:

    def test_updates_existing_file(self) -> None:
        tree = FolderTree({("root", "Docs"): "d1"})
        tree.client.find_files.return_value = [DriveItem("doc1", "letter.docx", DOCX_MIME)]
        tree.client.update_file.return_value = DriveItem("doc1", "letter.docx", DOCX_MIME)

        result = update_docx_file_in_path(tree.client, "Docs/letter.docx", "v2")

        assert result == {"file_id": "doc1", "file_name": "letter.docx"}
        tree.client.find_files.assert_called_once_with("letter.docx", "d1")
        tree.client.update_file.assert_called_once_with("doc1", "letter.docx", b"v2", DOCX_MIME)

    def test_missing_file_is_not_found(self) -> None:
        tree = FolderTree({("root", "Docs"): "d1"})
        tree.client.find_files.return_value = []

        result = update_docx_file_in_path(tree.client, "Docs/letter.docx", "v2")

        assert result["kind"] == "not_found"
        assert "letter.docx" in result["message"]
        tree.client.update_file.assert_not_called()

    def test_rejects_wrong_extension_without_remote_calls(self) -> None:
        client = MagicMock()

        result = update_docx_file_in_path(client, "Docs/letter.pdf", "x")

        assert result["kind"] == "validation_error"
        assert client.mock_calls == []
