"""
Type definitions for drive-folders-mcp.

Dataclasses defining the contracts between layers:
- Adapters raise DriveError subclasses and return DriveItem records
- Tools wire everything together and return plain dicts for MCP

Nothing here calls the network.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


# ============================================================================
# ERROR TYPES
# ============================================================================

class ErrorKind(Enum):
    """Categories of errors for consistent handling."""
    COMMUNICATION_ERROR = "communication_error"  # Remote call failed (network, auth, quota)
    NOT_FOUND = "not_found"                      # Lookup yielded zero results
    VALIDATION_ERROR = "validation_error"        # Bad or missing parameters
    UNSUPPORTED_TYPE = "unsupported_type"        # MIME type the read path can't handle


class DriveError(Exception):
    """
    Structured error for consistent handling across layers.

    Adapters raise these on API failures.
    Tools catch and format for MCP response.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for MCP response."""
        return {
            "error": True,
            "kind": self.kind.value,
            "message": self.message,
            **self.details,
        }


class CommunicationError(DriveError):
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(ErrorKind.COMMUNICATION_ERROR, message, details)


class NotFound(DriveError):
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(ErrorKind.NOT_FOUND, message, details)


class ValidationError(DriveError):
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(ErrorKind.VALIDATION_ERROR, message, details)


class UnsupportedType(DriveError):
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(ErrorKind.UNSUPPORTED_TYPE, message, details)


# ============================================================================
# DRIVE TYPES
# ============================================================================

@dataclass(frozen=True)
class DriveItem:
    """A file or folder record as returned by Drive. Only ever parsed, never invented."""
    id: str
    name: str
    mime_type: str = ""

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "DriveItem":
        return cls(
            id=raw["id"],
            name=raw.get("name", ""),
            mime_type=raw.get("mimeType", ""),
        )

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "mime_type": self.mime_type}


# ============================================================================
# TOOL RESPONSE TYPES
# ============================================================================

@dataclass
class FileResult:
    """Result of creating or updating a file at a path."""
    file_id: str
    file_name: str

    def to_dict(self) -> dict[str, Any]:
        return {"file_id": self.file_id, "file_name": self.file_name}


@dataclass
class SuggestionResult:
    """Folder chosen (and resolved) for a piece of content."""
    folder_id: str
    folder_name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "suggested_folder_id": self.folder_id,
            "suggested_folder_name": self.folder_name,
        }
