"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from notion_issue_sync.utils.constants import DEFAULT_GITHUB_API_URL, DEFAULT_NOTION_API_URL


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # Notion settings
    NOTION_API_URL: str = DEFAULT_NOTION_API_URL
    NOTION_DATABASE_ID: str | None = None
    NOTION_KEY: str | None = None

    # GitHub settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL
    GITHUB_REPO_OWNER: str | None = None
    GITHUB_REPO_NAME: str | None = None
    GITHUB_KEY: str | None = None
