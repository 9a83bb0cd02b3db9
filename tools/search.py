"""
Search tool implementation.

Passes a Drive query straight through (Drive search syntax, e.g.
"name contains 'Projects'") and drains every page of results.
"""

from typing import Any

from adapters.drive import DriveClient
from logging_config import logger
from models import DriveError
from validation import require_param


def search_drive_items(client: DriveClient, query: str | None) -> dict[str, Any]:
    """
    All files and folders matching query, in the order Drive returns them.

    Args:
        query: Drive API search query

    Returns:
        {"files": [{id, name, mime_type}], "count": int}, or an error dict
    """
    try:
        q = require_param(query, "query")
        items = client.list_all_items(q)
    except DriveError as e:
        return e.to_dict()

    logger.info(f"Search {query!r} matched {len(items)} items")
    return {"files": [item.to_dict() for item in items], "count": len(items)}
