"""Orchestrates the synchronization of GitHub issues into a Notion database."""

import time
from functools import partial

import structlog

from notion_issue_sync.configuration.models import SyncConfig
from notion_issue_sync.github.abc import GitHubClientBase
from notion_issue_sync.github.adapter import GitHubKitAdapter
from notion_issue_sync.notion.abc import NotionClientBase
from notion_issue_sync.notion.adapter import NotionAdapter
from notion_issue_sync.synchronize.batches import execute_in_batches
from notion_issue_sync.synchronize.issues import fetch_remote_issues
from notion_issue_sync.synchronize.reconcile import plan_sync_operations
from notion_issue_sync.synchronize.results import SyncResult
from notion_issue_sync.synchronize.rows import create_row_for, fetch_row_identifier_mapping, update_row_for
from notion_issue_sync.utils.constants import OPERATION_BATCH_SIZE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def sync_github_issues_to_notion(
    github_adapter: GitHubClientBase,
    notion_adapter: NotionClientBase,
    database_id: str,
    batch_size: int = OPERATION_BATCH_SIZE,
) -> SyncResult:
    """Mirror every GitHub issue into the Notion database.

    Phases run strictly one after another: load existing rows, fetch issues,
    reconcile, create new rows, update existing rows. Any failure aborts the run;
    rerunning is safe because reconciliation starts from the database contents.
    """
    start_time = time.time()
    row_ids_by_issue_number = await fetch_row_identifier_mapping(notion_adapter, database_id)
    issues = await fetch_remote_issues(github_adapter)
    plan = plan_sync_operations(issues, row_ids_by_issue_number)

    logger.info("Creating Notion rows for new issues", create_count=len(plan.to_create))
    create_result = await execute_in_batches(
        plan.to_create,
        partial(create_row_for, notion_adapter=notion_adapter, database_id=database_id),
        batch_size=batch_size,
    )

    logger.info("Updating Notion rows for existing issues", update_count=len(plan.to_update))
    update_result = await execute_in_batches(
        plan.to_update,
        partial(update_row_for, notion_adapter=notion_adapter),
        batch_size=batch_size,
    )

    end_time = time.time()
    logger.info(
        "Notion database is in sync with GitHub",
        start_time=start_time,
        end_time=end_time,
        duration=round(end_time - start_time, 2),
        created_count=create_result.operation_count,
        updated_count=update_result.operation_count,
    )
    return SyncResult(
        remote_issue_count=len(issues),
        existing_row_count=len(row_ids_by_issue_number),
        plan=plan,
        create_result=create_result,
        update_result=update_result,
    )


async def run_sync_workflow(config: SyncConfig, batch_size: int = OPERATION_BATCH_SIZE) -> SyncResult:
    """Run the sync workflow: build clients from the configuration and mirror all issues."""
    github_adapter = GitHubKitAdapter.create(
        owner=config.github_repo_owner,
        repo_name=config.github_repo_name,
        github_key=config.github_key,
        github_api_url=config.github_api_url,
    )
    async with NotionAdapter.create(notion_key=config.notion_key, notion_api_url=config.notion_api_url) as notion_adapter:
        return await sync_github_issues_to_notion(github_adapter, notion_adapter, config.notion_database_id, batch_size=batch_size)
