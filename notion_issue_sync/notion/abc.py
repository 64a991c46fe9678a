"""Base ABC for Notion database clients."""

from abc import ABC, abstractmethod
from typing import Any


class NotionClientBase(ABC):
    """Base ABC for Notion database clients."""

    # Database queries
    @abstractmethod
    async def query_rows(self, database_id: str, cursor: str | None = None) -> tuple[list[dict[str, Any]], str | None]:
        """Query one page of rows from a database, returning the rows and the next cursor."""
        pass

    # Page (row) CRUD
    @abstractmethod
    async def get_row_property(self, row_id: str, property_id: str) -> dict[str, Any]:
        """Retrieve a single property item of a row."""
        pass

    @abstractmethod
    async def create_row(self, database_id: str, properties: dict[str, Any]) -> dict[str, Any]:
        """Create a row in a database."""
        pass

    @abstractmethod
    async def update_row(self, row_id: str, properties: dict[str, Any]) -> dict[str, Any]:
        """Update the given properties of a row, leaving other properties untouched."""
        pass
