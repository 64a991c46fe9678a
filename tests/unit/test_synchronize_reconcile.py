"""Contains unit tests for partitioning issues into create and update operations."""

from datetime import datetime, timezone
from types import MappingProxyType

import pytest

from notion_issue_sync.synchronize.models import CreateRowOperation, RemoteIssue, UpdateRowOperation
from notion_issue_sync.synchronize.reconcile import plan_sync_operations


def make_remote_issue(number: int) -> RemoteIssue:
    """Create a RemoteIssue for the given issue number."""
    return RemoteIssue(
        number=number,
        title=f"Issue {number}",
        state="open",
        url=f"https://github.com/octo/repo/issues/{number}",
        created_at=datetime(2024, 3, number, tzinfo=timezone.utc),
    )


@pytest.mark.parametrize(
    "numbers, mapping, expected_create, expected_update",
    [
        pytest.param([], {}, [], [], id="nothing to do"),
        pytest.param([1, 2], {}, [1, 2], [], id="all issues need to be created"),
        pytest.param([1, 2], {1: "row-1", 2: "row-2"}, [], [(1, "row-1"), (2, "row-2")], id="all issues need to be updated"),
        pytest.param([3, 1, 2], {1: "row-1"}, [3, 2], [(1, "row-1")], id="composite: create and update"),
        pytest.param([4], {1: "row-1", 9: "row-9"}, [4], [], id="rows without issues are left alone"),
    ],
)
def test_plan_sync_operations(
    numbers: list[int],
    mapping: dict[int, str],
    expected_create: list[int],
    expected_update: list[tuple[int, str]],
) -> None:
    """Test issues are routed by membership in the mapping, preserving input order."""
    plan = plan_sync_operations([make_remote_issue(number) for number in numbers], MappingProxyType(mapping))

    assert [operation.issue.number for operation in plan.to_create] == expected_create
    assert [(operation.issue.number, operation.row_id) for operation in plan.to_update] == expected_update


def test_plan_sync_operations_partition_is_complete_and_disjoint() -> None:
    """Test every issue lands in exactly one list, and in the right one."""
    issues = [make_remote_issue(number) for number in range(1, 26)]
    mapping = MappingProxyType({number: f"row-{number}" for number in range(1, 26) if number % 3 == 0})

    plan = plan_sync_operations(issues, mapping)

    created = {operation.issue.number for operation in plan.to_create}
    updated = {operation.issue.number for operation in plan.to_update}
    assert created.isdisjoint(updated)
    assert created | updated == {issue.number for issue in issues}
    assert updated == set(mapping)
    assert all(operation.row_id == mapping[operation.issue.number] for operation in plan.to_update)


def test_plan_sync_operations_is_idempotent() -> None:
    """Test planning twice on the same input yields identical plans."""
    issues = [make_remote_issue(number) for number in (5, 2, 8)]
    mapping = MappingProxyType({2: "row-2"})

    assert plan_sync_operations(issues, mapping) == plan_sync_operations(issues, mapping)


def test_plan_sync_operations_end_to_end_scenario() -> None:
    """Test an open issue already mirrored is updated and a new closed issue is created."""
    issue_1 = make_remote_issue(1)
    issue_2 = make_remote_issue(2).model_copy(update={"state": "closed"})

    plan = plan_sync_operations([issue_1, issue_2], MappingProxyType({1: "rowA"}))

    assert plan.to_create == (CreateRowOperation(issue=issue_2),)
    assert plan.to_update == (UpdateRowOperation(issue=issue_1, row_id="rowA"),)
