"""Contains utility functions for synchronization actions."""

from typing import Any, Sequence

from notion_issue_sync.synchronize.types import HasName, LabelType


def extract_label_names(labels: Sequence[LabelType] | None) -> set[str]:
    """Extract label names from a list of GitHub label objects, strings, or dicts."""
    names: set[str] = set()
    for label in labels or []:
        if isinstance(label, str):
            names.add(label)
        elif isinstance(label, dict) and "name" in label:
            names.add(label["name"])
        elif isinstance(label, HasName) and label.name is not None:
            names.add(label.name)
    return names


def is_pull_request(github_issue: Any) -> bool:
    """Return True if a record from the GitHub issues feed is actually a pull request.

    githubkit leaves the marker as UNSET on plain issues, which is falsy like None.
    """
    return bool(getattr(github_issue, "pull_request", None))
