"""Contains exceptions raised when talking to the Notion API."""


class NotionAPIError(Exception):
    """Raised when the Notion API answers with a non-success status code."""

    def __init__(self, status_code: int, code: str | None, message: str, url: str | None = None) -> None:
        """Initializes the exception with the details reported by Notion."""
        super().__init__(f"Notion API error {status_code} ({code or 'unknown'}): {message}")
        self.status_code = status_code
        self.code = code
        self.message = message
        self.url = url
