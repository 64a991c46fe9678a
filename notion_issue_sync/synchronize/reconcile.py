"""Decides which GitHub issues need a new Notion row and which update an existing one."""

from typing import Sequence

import structlog

from notion_issue_sync.synchronize.models import CreateRowOperation, RemoteIssue, SyncPlan, UpdateRowOperation
from notion_issue_sync.synchronize.types import RowIdentifierMapping

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def plan_sync_operations(issues: Sequence[RemoteIssue], row_ids_by_issue_number: RowIdentifierMapping) -> SyncPlan:
    """Partition issues into create and update operations.

    Key is issue number. An issue already mirrored by a row is updated in place,
    every other issue gets a new row. Input order is preserved within each list.
    """
    to_create: list[CreateRowOperation] = []
    to_update: list[UpdateRowOperation] = []
    for issue in issues:
        row_id = row_ids_by_issue_number.get(issue.number)
        if row_id is not None:
            to_update.append(UpdateRowOperation(issue=issue, row_id=row_id))
        else:
            to_create.append(CreateRowOperation(issue=issue))
    logger.info(
        "Planned Notion operations",
        issue_count=len(issues),
        create_count=len(to_create),
        update_count=len(to_update),
    )
    return SyncPlan(to_create=tuple(to_create), to_update=tuple(to_update))
