"""Runs Notion operations in bounded-size concurrent batches."""

import asyncio
from typing import Any, Awaitable, Callable, Sequence, TypeVar

import structlog

from notion_issue_sync.synchronize.results import BatchExecutionResult
from notion_issue_sync.utils.constants import OPERATION_BATCH_SIZE
from notion_issue_sync.utils.helpers import chunk

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

T = TypeVar("T")


async def execute_in_batches(
    operations: Sequence[T],
    apply: Callable[[T], Awaitable[Any]],
    batch_size: int = OPERATION_BATCH_SIZE,
) -> BatchExecutionResult:
    """Apply every operation, at most batch_size at a time.

    All operations of a batch run concurrently and the whole batch must finish
    before the next one starts. If any operation fails, the remaining operations
    of that batch are cancelled, no further batch is started, and the failure is
    raised as an ExceptionGroup.
    """
    batches = chunk(operations, batch_size)
    for batch_number, batch in enumerate(batches, start=1):
        async with asyncio.TaskGroup() as task_group:
            for operation in batch:
                task_group.create_task(apply(operation))
        logger.info("Completed batch", batch_size=len(batch), batch_number=batch_number, batch_count=len(batches))
    return BatchExecutionResult(operation_count=len(operations), batch_count=len(batches))
