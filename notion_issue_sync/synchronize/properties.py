"""Maps RemoteIssue objects onto Notion database row properties."""

from typing import Any

from notion_issue_sync.synchronize.models import RemoteIssue
from notion_issue_sync.synchronize.schema import DatabaseColumn


def rich_text(content: str) -> list[dict[str, Any]]:
    """Build a Notion rich text value holding a single plain text run."""
    return [{"type": "text", "text": {"content": content}}]


def notion_row_properties_from(issue: RemoteIssue) -> dict[str, Any]:
    """Return the properties that create or update the Notion row mirroring an issue.

    Priority, Type and Description are only present when the issue carries them,
    so updating a row never clears values set by hand in Notion.
    """
    properties: dict[str, Any] = {
        DatabaseColumn.NAME.value: {"title": rich_text(issue.title)},
        DatabaseColumn.ISSUE_NUMBER.value: {"number": issue.number},
        DatabaseColumn.STATE.value: {"select": {"name": issue.state}},
        DatabaseColumn.ISSUE_URL.value: {"url": issue.url},
        DatabaseColumn.CREATED_AT.value: {"date": {"start": issue.created_at.date().isoformat()}},
    }
    if issue.priority is not None:
        properties[DatabaseColumn.PRIORITY.value] = {"select": {"name": issue.priority.value}}
    if issue.type is not None:
        properties[DatabaseColumn.TYPE.value] = {"select": {"name": issue.type.value}}
    if issue.description is not None:
        properties[DatabaseColumn.DESCRIPTION.value] = {"rich_text": rich_text(issue.description)}
    return properties
