"""Contains results of application execution."""

from notion_issue_sync.synchronize.models import SyncPlan


class BatchExecutionResult:
    """Contains results of executing one list of operations in batches."""

    def __init__(self, operation_count: int, batch_count: int) -> None:
        """Initialize the result with the number of operations and batches executed."""
        self.operation_count = operation_count
        self.batch_count = batch_count


class SyncResult:
    """Contains results of the GitHub to Notion synchronization workflow."""

    def __init__(
        self,
        remote_issue_count: int,
        existing_row_count: int,
        plan: SyncPlan,
        create_result: BatchExecutionResult,
        update_result: BatchExecutionResult,
    ) -> None:
        """Initialize the result with the counts, the plan, and the batch execution results."""
        self.remote_issue_count = remote_issue_count
        self.existing_row_count = existing_row_count
        self.plan = plan
        self.create_result = create_result
        self.update_result = update_result

    @property
    def created_count(self) -> int:
        """Number of rows created."""
        return self.create_result.operation_count

    @property
    def updated_count(self) -> int:
        """Number of rows updated."""
        return self.update_result.operation_count
