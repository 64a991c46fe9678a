"""Contains logic for reading and writing the Notion rows that mirror GitHub issues."""

from types import MappingProxyType
from typing import Any

import structlog

from notion_issue_sync.notion.abc import NotionClientBase
from notion_issue_sync.synchronize.exceptions import DatabaseSchemaMismatchError
from notion_issue_sync.synchronize.models import CreateRowOperation, UpdateRowOperation
from notion_issue_sync.synchronize.properties import notion_row_properties_from
from notion_issue_sync.synchronize.schema import IDENTIFIER_COLUMN
from notion_issue_sync.synchronize.types import RowIdentifierMapping

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def list_database_rows(notion_adapter: NotionClientBase, database_id: str) -> list[dict[str, Any]]:
    """Fetch every row of the database, following the query cursor page by page."""
    rows: list[dict[str, Any]] = []
    cursor: str | None = None
    while True:
        page_rows, cursor = await notion_adapter.query_rows(database_id, cursor)
        rows.extend(page_rows)
        if not cursor:
            break
    return rows


def identifier_property_id(row: dict[str, Any]) -> str:
    """Return the property ID of the identifier column on a row."""
    try:
        return row["properties"][IDENTIFIER_COLUMN.value]["id"]
    except KeyError as exc:
        raise DatabaseSchemaMismatchError(IDENTIFIER_COLUMN.value, row.get("id", "<unknown>")) from exc


async def fetch_row_identifier_mapping(notion_adapter: NotionClientBase, database_id: str) -> RowIdentifierMapping:
    """Build the read-only mapping of issue number to row ID from the current database contents.

    Rows with an empty identifier column are skipped.
    """
    logger.info("Fetching rows from Notion", database_id=database_id)
    rows = await list_database_rows(notion_adapter, database_id)
    logger.info("Fetched rows from Notion", row_count=len(rows))

    row_ids_by_issue_number: dict[int, str] = {}
    for row in rows:
        property_item = await notion_adapter.get_row_property(row["id"], identifier_property_id(row))
        issue_number = property_item.get("number")
        if issue_number is None:
            logger.info("Skipping Notion row without an issue number", row_id=row["id"])
            continue
        row_ids_by_issue_number[int(issue_number)] = row["id"]
        logger.info("Fetched Notion metadata for GitHub issue", issue_number=issue_number, row_id=row["id"])
    return MappingProxyType(row_ids_by_issue_number)


async def create_row_for(operation: CreateRowOperation, notion_adapter: NotionClientBase, database_id: str) -> dict[str, Any]:
    """Create the Notion row mirroring a new issue."""
    logger.debug("Creating Notion row", issue_number=operation.issue.number)
    return await notion_adapter.create_row(database_id, notion_row_properties_from(operation.issue))


async def update_row_for(operation: UpdateRowOperation, notion_adapter: NotionClientBase) -> dict[str, Any]:
    """Update the Notion row already mirroring an issue."""
    logger.debug("Updating Notion row", issue_number=operation.issue.number, row_id=operation.row_id)
    return await notion_adapter.update_row(operation.row_id, notion_row_properties_from(operation.issue))
