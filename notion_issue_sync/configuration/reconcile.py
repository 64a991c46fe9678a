"""Reconcile synchronization configuration from environment variables."""

from notion_issue_sync.configuration.env import Settings
from notion_issue_sync.configuration.exceptions import RequiredConfigurationElementError
from notion_issue_sync.configuration.models import SyncConfig

REQUIRED_CONFIGURATION_ELEMENTS: tuple[tuple[str, str], ...] = (
    ("Notion database ID", "NOTION_DATABASE_ID"),
    ("GitHub repository owner", "GITHUB_REPO_OWNER"),
    ("GitHub repository name", "GITHUB_REPO_NAME"),
    ("GitHub API key", "GITHUB_KEY"),
    ("Notion API key", "NOTION_KEY"),
)
"""Human-readable name and environment variable of every required element, in validation order."""


def validate_required_value(value: str | None, name: str, env_name: str) -> str:
    """Return value if it is present and non-empty, otherwise raise.

    Raises:
        RequiredConfigurationElementError: If the value is None, empty, or whitespace only.
    """
    if value is None or not value.strip():
        raise RequiredConfigurationElementError(name=name, env_name=env_name)
    return value


async def reconcile_sync_configuration(settings: Settings | None = None) -> SyncConfig:
    """Build the synchronization configuration, validating every required element.

    Args:
        settings (Settings | None): Settings to reconcile. Loaded from the environment when omitted.

    Raises:
        RequiredConfigurationElementError: For the first required element that is missing.

    Returns:
        SyncConfig: The validated configuration.
    """
    if settings is None:
        settings = Settings()

    values: dict[str, str] = {}
    for name, env_name in REQUIRED_CONFIGURATION_ELEMENTS:
        values[env_name] = validate_required_value(getattr(settings, env_name), name, env_name)

    return SyncConfig(
        notion_database_id=values["NOTION_DATABASE_ID"],
        github_repo_owner=values["GITHUB_REPO_OWNER"],
        github_repo_name=values["GITHUB_REPO_NAME"],
        github_key=values["GITHUB_KEY"],
        notion_key=values["NOTION_KEY"],
        debug=settings.DEBUG,
        github_api_url=settings.GITHUB_API_URL,
        notion_api_url=settings.NOTION_API_URL,
    )
