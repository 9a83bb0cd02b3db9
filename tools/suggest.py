"""
Folder suggestion: pick a destination folder from a content name.

Keyword rules are checked in order; the first rule with a keyword that
appears (case-insensitively) in the name wins. The chosen folder is then
found or created at the top of My Drive.
"""

from dataclasses import dataclass
from typing import Any

from adapters.drive import DriveClient
from logging_config import logger
from models import DriveError, SuggestionResult
from tools.folders import resolve_or_create
from validation import require_param


@dataclass(frozen=True)
class SuggestionRule:
    keywords: tuple[str, ...]
    folder_name: str

    def matches(self, lowered_name: str) -> bool:
        return any(keyword in lowered_name for keyword in self.keywords)


# Order matters: "report.docx" is a report, not a document.
SUGGESTION_RULES: tuple[SuggestionRule, ...] = (
    SuggestionRule(("report",), "Reports"),
    SuggestionRule(("image", "photo"), "Images"),
    SuggestionRule(("document", "doc"), "Documents"),
    SuggestionRule(("code", "src"), "Code"),
)

DEFAULT_FOLDER_NAME = "Miscellaneous"


def pick_folder_name(
    content_name: str,
    rules: tuple[SuggestionRule, ...] = SUGGESTION_RULES,
) -> str:
    """Name of the folder content_name belongs in (no API calls)."""
    lowered = content_name.lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule.folder_name
    return DEFAULT_FOLDER_NAME


def suggest_folder(client: DriveClient, content_name: str) -> SuggestionResult:
    """
    Pick a folder for content_name and make sure it exists under the root.

    Raises:
        CommunicationError: Lookup or creation failed
    """
    folder_name = pick_folder_name(content_name)
    folder_id = resolve_or_create(client, [folder_name])
    logger.info(f"Suggested '{folder_name}' ({folder_id}) for '{content_name}'")
    return SuggestionResult(folder_id=folder_id, folder_name=folder_name)


def suggest_folder_for_content(client: DriveClient, content_name: str | None) -> dict[str, Any]:
    """Tool handler: validate, suggest, shape the payload."""
    try:
        name = require_param(content_name, "content_name")
        return suggest_folder(client, name).to_dict()
    except DriveError as e:
        return e.to_dict()
