"""Shared constants used across the application."""

# Synchronization Constants
# -------------------------

OPERATION_BATCH_SIZE = 10
"""Maximum number of Notion create/update calls in flight at once."""

GITHUB_ISSUES_PAGE_SIZE = 100
"""Number of issues requested per page when listing GitHub issues."""

DESCRIPTION_MAX_LENGTH = 1999
"""Maximum number of issue body characters copied into the Description column."""

# API Settings
# ------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API base URL."""

DEFAULT_NOTION_API_URL = "https://api.notion.com"
"""Default Notion REST API base URL."""

NOTION_API_VERSION = "2022-06-28"
"""Value sent in the Notion-Version header."""

NOTION_REQUEST_TIMEOUT = 30.0
"""Timeout in seconds applied to every Notion request."""
