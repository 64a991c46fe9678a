"""GitHub client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Literal, Self, TypeVar

import structlog
from githubkit import GitHub, Response
from githubkit.auth import TokenAuthStrategy
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import Issue

from notion_issue_sync.utils.constants import DEFAULT_GITHUB_API_URL, GITHUB_ISSUES_PAGE_SIZE

from .abc import GitHubClientBase
from .client import get_github_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def log_github_request_failure(func: F) -> F:
    """Decorator that logs failed GitHub requests with their details before re-raising them."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            try:
                error_data = exc.response.json()
            except ValueError:
                error_data = {}
            logger.error(
                "GitHub request failed",
                function=func.__name__,
                message=error_data.get("message") if isinstance(error_data, dict) else None,
                url=str(getattr(exc.response, "url", None)),
                status_code=exc.response.status_code,
            )
            raise

    return wrapper  # type: ignore


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHub[TokenAuthStrategy], owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    @classmethod
    def create(cls, owner: str, repo_name: str, github_key: str, github_api_url: str = DEFAULT_GITHUB_API_URL) -> Self:
        """Create a new GitHub client adapter for the given repository.

        Args:
            owner: Owner (user or organization) of the repository
            repo_name: Name of the repository
            github_key: Personal access token used to authenticate
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        return cls(get_github_client(github_key, github_api_url), owner, repo_name)

    @log_github_request_failure
    async def list_issues(
        self,
        state: Literal["open", "closed", "all"] = "all",
        per_page: int = GITHUB_ISSUES_PAGE_SIZE,
        **kwargs: Any,
    ) -> list[Issue]:
        """List all issues for a repository, handling pagination.

        GitHub returns pull requests in the same feed; they are not filtered here.
        """
        all_issues: list[Issue] = []
        page: int = 1
        while True:
            response: Response[list[Issue]] = await self.client.rest.issues.async_list_for_repo(
                owner=self.owner,
                repo=self.repo_name,
                state=state,
                per_page=per_page,
                page=page,
                **kwargs,
            )
            issues: list[Issue] = response.parsed_data
            if not issues:
                break
            all_issues.extend(issues)
            logger.debug("Fetched page of GitHub issues", page=page, issue_count=len(issues))
            if len(issues) < per_page:
                break
            page += 1
        return all_issues
