"""Fixtures for unit tests."""

from typing import Any, Callable, Generator

import pytest
import structlog
from githubkit.versions.latest.models import Issue


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


def build_github_issue_payload(number: int, labels: list[str] | None = None, body: str | None = None, is_pull_request: bool = False) -> dict[str, Any]:
    """Build a GitHub REST issue payload as returned by the list issues endpoint."""
    api_url = f"https://api.github.com/repos/octo/repo/issues/{number}"
    payload: dict[str, Any] = {
        "id": 1000 + number,
        "node_id": f"I_kwDO{number}",
        "url": api_url,
        "repository_url": "https://api.github.com/repos/octo/repo",
        "labels_url": f"{api_url}/labels{{/name}}",
        "comments_url": f"{api_url}/comments",
        "events_url": f"{api_url}/events",
        "html_url": f"https://github.com/octo/repo/issues/{number}",
        "number": number,
        "state": "open",
        "title": f"Issue {number}",
        "body": body,
        "user": None,
        "labels": [
            {
                "id": index,
                "node_id": f"LA_{index}",
                "url": f"https://api.github.com/repos/octo/repo/labels/{index}",
                "name": name,
                "color": "d73a4a",
                "default": False,
                "description": None,
            }
            for index, name in enumerate(labels or [], start=1)
        ],
        "assignee": None,
        "assignees": [],
        "milestone": None,
        "locked": False,
        "comments": 0,
        "created_at": "2024-06-01T12:00:00Z",
        "updated_at": "2024-06-02T12:00:00Z",
        "closed_at": None,
        "author_association": "OWNER",
    }
    if is_pull_request:
        payload["pull_request"] = {
            "merged_at": None,
            "diff_url": f"https://github.com/octo/repo/pull/{number}.diff",
            "html_url": f"https://github.com/octo/repo/pull/{number}",
            "patch_url": f"https://github.com/octo/repo/pull/{number}.patch",
            "url": f"https://api.github.com/repos/octo/repo/pulls/{number}",
        }
    return payload


@pytest.fixture
def make_githubkit_issue() -> Callable[..., Issue]:
    """Return a factory building githubkit Issue models from REST payloads."""

    def factory(number: int, labels: list[str] | None = None, body: str | None = None, is_pull_request: bool = False) -> Issue:
        """Build one githubkit Issue."""
        return Issue.model_validate(build_github_issue_payload(number, labels=labels, body=body, is_pull_request=is_pull_request))

    return factory
