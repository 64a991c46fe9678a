"""Extracts the fields mirrored into Notion from GitHub issues."""

from typing import Any, Sequence, TypeVar

from githubkit.versions.latest.models import Issue

from notion_issue_sync.synchronize.models import IssuePriority, IssueType, RemoteIssue
from notion_issue_sync.synchronize.types import LabelType
from notion_issue_sync.synchronize.utils import extract_label_names
from notion_issue_sync.utils.constants import DESCRIPTION_MAX_LENGTH
from notion_issue_sync.utils.helpers import truncate_string_at_end

E = TypeVar("E", IssueType, IssuePriority)


def first_matching_label(labels: Sequence[LabelType] | None, candidates: type[E]) -> E | None:
    """Return the first enum member, in declaration order, whose value is one of the label names.

    Declaration order is precedence order, so an issue labelled both "Bug" and
    "Tech Debt" is classified as a bug regardless of label order.
    """
    names = extract_label_names(labels)
    for candidate in candidates:
        if candidate.value in names:
            return candidate
    return None


def get_type_from(labels: Sequence[LabelType] | None) -> IssueType | None:
    """Derive the issue type from its labels."""
    return first_matching_label(labels, IssueType)


def get_priority_from(labels: Sequence[LabelType] | None) -> IssuePriority | None:
    """Derive the issue priority from its labels."""
    return first_matching_label(labels, IssuePriority)


def extract_issue_from(github_issue: Issue | Any) -> RemoteIssue:
    """Normalize a GitHub issue into a RemoteIssue.

    The identifier is the repository-scoped issue number, not GitHub's global ID.
    Pull requests must be filtered out before calling this function.
    """
    labels = getattr(github_issue, "labels", None)
    return RemoteIssue(
        number=github_issue.number,
        title=github_issue.title,
        state=github_issue.state,
        url=github_issue.html_url,
        created_at=github_issue.created_at,
        type=get_type_from(labels),
        priority=get_priority_from(labels),
        description=truncate_string_at_end(getattr(github_issue, "body", None), DESCRIPTION_MAX_LENGTH),
    )
