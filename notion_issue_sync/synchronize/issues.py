"""Contains logic for fetching GitHub issues to mirror."""

import structlog

from notion_issue_sync.github.abc import GitHubClientBase
from notion_issue_sync.synchronize.extract import extract_issue_from
from notion_issue_sync.synchronize.models import RemoteIssue
from notion_issue_sync.synchronize.utils import is_pull_request
from notion_issue_sync.utils.constants import GITHUB_ISSUES_PAGE_SIZE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def fetch_remote_issues(github_adapter: GitHubClientBase, per_page: int = GITHUB_ISSUES_PAGE_SIZE) -> list[RemoteIssue]:
    """Fetch every issue of the repository, open and closed, omitting pull requests."""
    logger.info("Fetching issues from GitHub")
    issues: list[RemoteIssue] = []
    for github_issue in await github_adapter.list_issues(state="all", per_page=per_page):
        if is_pull_request(github_issue):
            continue
        issues.append(extract_issue_from(github_issue))
        logger.info("Fetched GitHub data for issue", issue_number=github_issue.number)
    logger.info("Fetched issues from GitHub", issue_count=len(issues))
    return issues
