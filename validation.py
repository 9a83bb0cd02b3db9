"""
Input validation and path utilities.

Handles:
- Required string parameters
- Slash-separated Drive paths → folder segments + file name
- Extension checks for typed uploads
- Escaping literals for Drive query strings

Pure functions: no API calls, no logging.
"""

from typing import Iterable

from models import ValidationError

# Segments that never name a folder
_SKIPPED_SEGMENTS = frozenset({"", "."})


# =============================================================================
# PARAMETERS
# =============================================================================

def require_param(value: str | None, name: str) -> str:
    """
    Return value unchanged, or raise if it is missing or blank.

    Raises:
        ValidationError: If value is None or whitespace-only
    """
    if value is None or not value.strip():
        raise ValidationError(f"required argument '{name}' is missing")
    return value


# =============================================================================
# PATHS
# =============================================================================

def split_folder_path(path: str) -> list[str]:
    """
    Split a slash-separated folder path into segment names.

    Empty and '.' segments are dropped, so '.', '/', '' and 'a//b/' all
    normalise ('a//b/' → ['a', 'b']). An empty list means the root.
    Names are not otherwise normalised: lookups are case-sensitive.
    """
    return normalize_segments(path.split("/"))


def normalize_segments(segments: Iterable[str]) -> list[str]:
    """Drop empty and '.' segments from an already-split path."""
    return [part for part in segments if part not in _SKIPPED_SEGMENTS]


def split_file_path(path: str) -> tuple[list[str], str]:
    """
    Split a file path into (folder segments, file name).

    'Reports/2024/q1.txt' → (['Reports', '2024'], 'q1.txt')
    'q1.txt'              → ([], 'q1.txt')

    Raises:
        ValidationError: If the path has no file name
    """
    segments = split_folder_path(path)
    if not segments:
        raise ValidationError(
            f"path '{path}' does not include a file name (e.g. 'MyFolder/file.txt')"
        )
    return segments[:-1], segments[-1]


def ensure_extension(file_name: str, extension: str) -> None:
    """
    Check that file_name ends with extension (case-insensitive).

    Raises:
        ValidationError: If the extension doesn't match
    """
    if not file_name.lower().endswith(extension.lower()):
        raise ValidationError(
            f"file name must have a {extension} extension",
            details={"file_name": file_name},
        )


# =============================================================================
# DRIVE QUERY
# =============================================================================

def escape_query_value(value: str) -> str:
    """
    Escape a literal for use inside single quotes in a Drive query.

    Drive's query language uses backslash escapes: \\ for a backslash,
    \\' for a quote.
    """
    return value.replace("\\", "\\\\").replace("'", "\\'")
