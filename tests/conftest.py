"""
Shared pytest fixtures for drive-folders-mcp tests.

Adapter mocking infrastructure is provided here for testing the
DriveClient and tools without hitting real Google APIs.
"""

from unittest.mock import MagicMock

import pytest

from adapters.drive import DriveClient

# Re-export make_http_error for convenience (actual implementation in mock_utils.py)
from tests.mock_utils import make_http_error  # noqa: F401, E402


@pytest.fixture
def mock_drive_service() -> MagicMock:
    """
    Create a mock Google Drive service.

    Wire responses with tests.helpers.mock_api_chain:

        def test_something(mock_drive_service, drive_client):
            mock_api_chain(mock_drive_service, "files.list.execute", {"files": []})
            drive_client.list_children("root")
    """
    return MagicMock()


@pytest.fixture
def drive_client(mock_drive_service: MagicMock) -> DriveClient:
    """A real DriveClient wrapped around the mock service."""
    return DriveClient(mock_drive_service)


@pytest.fixture
def mock_client() -> MagicMock:
    """A DriveClient stand-in for tool tests (spec'd, so typos fail)."""
    return MagicMock(spec=DriveClient)
