"""Schema of the Notion database that GitHub issues are mirrored into."""

from enum import Enum


class DatabaseColumn(str, Enum):
    """Names of the Notion database columns written by the synchronization."""

    NAME = "Name"
    ISSUE_NUMBER = "Issue Number"
    STATE = "State"
    ISSUE_URL = "Issue URL"
    CREATED_AT = "Created At"
    PRIORITY = "Priority"
    TYPE = "Type"
    DESCRIPTION = "Description"


IDENTIFIER_COLUMN = DatabaseColumn.ISSUE_NUMBER
"""Column holding the GitHub issue number used to match rows to issues."""
