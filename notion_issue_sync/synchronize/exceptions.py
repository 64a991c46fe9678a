"""Contains exceptions raised during synchronization."""


class DatabaseSchemaMismatchError(Exception):
    """Raised when a Notion row lacks a column the synchronization relies upon."""

    def __init__(self, column: str, row_id: str) -> None:
        """Initializes the exception with the missing column and the offending row."""
        super().__init__(f"Notion database row {row_id} has no '{column}' column")
        self.column = column
        self.row_id = row_id
