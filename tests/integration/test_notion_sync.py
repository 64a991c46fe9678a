"""Integration tests for the GitHub to Notion sync against live services."""

import pytest

from notion_issue_sync.configuration.reconcile import reconcile_sync_configuration
from notion_issue_sync.github.adapter import GitHubKitAdapter
from notion_issue_sync.notion.adapter import NotionAdapter
from notion_issue_sync.synchronize.driver import run_sync_workflow
from notion_issue_sync.synchronize.issues import fetch_remote_issues
from notion_issue_sync.synchronize.rows import fetch_row_identifier_mapping


@pytest.mark.asyncio
async def test_sync_twice_mirrors_every_issue_once() -> None:
    """Run the sync twice and check every issue is mirrored by exactly one row."""
    config = await reconcile_sync_configuration()

    await run_sync_workflow(config)
    second_run = await run_sync_workflow(config)

    assert second_run.created_count == 0
    assert second_run.updated_count == second_run.remote_issue_count

    github_adapter = GitHubKitAdapter.create(config.github_repo_owner, config.github_repo_name, config.github_key, config.github_api_url)
    issues = await fetch_remote_issues(github_adapter)
    async with NotionAdapter.create(config.notion_key, config.notion_api_url) as notion_adapter:
        mapping = await fetch_row_identifier_mapping(notion_adapter, config.notion_database_id)
    assert {issue.number for issue in issues} <= set(mapping)
