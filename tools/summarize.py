"""
Summarize tool: placeholder.

No model is called: the "summary" is the content cut to a fixed length.
Callers get a stable shape to build on.
"""

from typing import Any

from models import DriveError
from validation import require_param

DEFAULT_SUMMARY_CHARS = 500
ELLIPSIS = "..."


def truncate(content: str, max_chars: int = DEFAULT_SUMMARY_CHARS) -> str:
    """content unchanged if short enough, else its first max_chars plus '...'."""
    if len(content) <= max_chars:
        return content
    return content[:max_chars].rstrip() + ELLIPSIS


def summarize_content(content: str | None, max_chars: int = DEFAULT_SUMMARY_CHARS) -> dict[str, Any]:
    try:
        text = require_param(content, "content")
    except DriveError as e:
        return e.to_dict()
    return {"summary": truncate(text, max_chars)}
