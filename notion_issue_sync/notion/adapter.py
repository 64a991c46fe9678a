"""Notion database adapter for the httpx library."""

from functools import wraps
from types import TracebackType
from typing import Any, Awaitable, Callable, Self, TypeVar

import httpx
import structlog

from notion_issue_sync.utils.constants import DEFAULT_NOTION_API_URL

from .abc import NotionClientBase
from .client import get_notion_client
from .exceptions import NotionAPIError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_notion_errors(func: F) -> F:
    """Decorator to turn Notion error responses into NotionAPIError, logging the details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except httpx.HTTPStatusError as exc:
            try:
                error_data = exc.response.json()
            except ValueError:
                error_data = {}
            if not isinstance(error_data, dict):
                error_data = {}
            code = error_data.get("code")
            message = error_data.get("message", exc.response.reason_phrase)
            url = str(exc.request.url)
            logger.error(
                "Notion request failed",
                function=func.__name__,
                code=code,
                message=message,
                url=url,
                status_code=exc.response.status_code,
            )
            raise NotionAPIError(exc.response.status_code, code, message, url) from exc

    return wrapper  # type: ignore


class NotionAdapter(NotionClientBase):
    """Notion database adapter for the httpx library."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize the Notion adapter with an already-initialized client."""
        self.client = client

    @classmethod
    def create(cls, notion_key: str, notion_api_url: str = DEFAULT_NOTION_API_URL) -> Self:
        """Create a new Notion adapter authenticated with the given integration key."""
        logger.info("Creating client for Notion instance", notion_api_url=notion_api_url)
        return cls(get_notion_client(notion_key, notion_api_url))

    async def __aenter__(self) -> Self:
        """Enter the adapter context."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        """Close the adapter on context exit."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()

    async def _request(self, method: str, url: str, json: dict[str, Any] | None = None) -> dict[str, Any]:
        """Send a request and return the decoded JSON body, raising on error status codes."""
        response = await self.client.request(method, url, json=json)
        response.raise_for_status()
        return response.json()

    # Database queries
    @handle_notion_errors
    async def query_rows(self, database_id: str, cursor: str | None = None) -> tuple[list[dict[str, Any]], str | None]:
        """Query one page of rows from a database.

        Returns:
            Tuple of (rows, next_cursor). next_cursor is None on the last page.
        """
        body: dict[str, Any] = {}
        if cursor is not None:
            body["start_cursor"] = cursor
        data = await self._request("POST", f"/v1/databases/{database_id}/query", json=body)
        return data.get("results", []), data.get("next_cursor")

    # Page (row) CRUD
    @handle_notion_errors
    async def get_row_property(self, row_id: str, property_id: str) -> dict[str, Any]:
        """Retrieve a single property item of a row."""
        return await self._request("GET", f"/v1/pages/{row_id}/properties/{property_id}")

    @handle_notion_errors
    async def create_row(self, database_id: str, properties: dict[str, Any]) -> dict[str, Any]:
        """Create a row in a database."""
        return await self._request(
            "POST",
            "/v1/pages",
            json={"parent": {"database_id": database_id}, "properties": properties},
        )

    @handle_notion_errors
    async def update_row(self, row_id: str, properties: dict[str, Any]) -> dict[str, Any]:
        """Update the given properties of a row."""
        return await self._request("PATCH", f"/v1/pages/{row_id}", json={"properties": properties})
