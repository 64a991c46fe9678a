"""Models for configuration resolved from environment variables."""

from dataclasses import dataclass

from notion_issue_sync.utils.constants import DEFAULT_GITHUB_API_URL, DEFAULT_NOTION_API_URL


@dataclass(frozen=True)
class SyncConfig:
    """Configuration for a single GitHub to Notion synchronization run."""

    notion_database_id: str
    github_repo_owner: str
    github_repo_name: str
    github_key: str
    notion_key: str
    debug: bool = False
    github_api_url: str = DEFAULT_GITHUB_API_URL
    notion_api_url: str = DEFAULT_NOTION_API_URL
