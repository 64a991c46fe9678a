"""Sets up the authenticated githubkit client."""

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

from notion_issue_sync.utils.constants import DEFAULT_GITHUB_API_URL


def get_github_client(github_key: str, github_api_url: str = DEFAULT_GITHUB_API_URL) -> GitHub[TokenAuthStrategy]:
    """Returns an authenticated GitHub client using a personal access token.

    Supports custom base URL for GitHub Enterprise Server (GHES).
    """
    if not github_key:
        raise RuntimeError("GitHub token authentication requires a GitHub API key.")
    # Disable HTTP caching to always get fresh data
    return GitHub(auth=TokenAuthStrategy(github_key), base_url=github_api_url, http_cache=False)
