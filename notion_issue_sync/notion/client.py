"""Sets up the authenticated HTTP client for the Notion API."""

import httpx

from notion_issue_sync.utils.constants import DEFAULT_NOTION_API_URL, NOTION_API_VERSION, NOTION_REQUEST_TIMEOUT


def get_notion_client(notion_key: str, notion_api_url: str = DEFAULT_NOTION_API_URL) -> httpx.AsyncClient:
    """Returns an httpx client carrying Notion integration credentials."""
    if not notion_key:
        raise RuntimeError("Notion authentication requires a Notion API key.")
    return httpx.AsyncClient(
        base_url=notion_api_url,
        headers={
            "Authorization": f"Bearer {notion_key}",
            "Notion-Version": NOTION_API_VERSION,
            "Content-Type": "application/json",
        },
        timeout=NOTION_REQUEST_TIMEOUT,
    )
