# src/notion_scaffold/notion/workspace.py

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from notion_client import AsyncClient

from ..config import ConfigError, Settings
from ..core.models import Column, ContentBlock, RowValues
from .payloads import database_create_body, page_create_body, row_create_body

logger = logging.getLogger(__name__)


def create_notion_client(settings: Settings) -> AsyncClient:
    """
    Build the async Notion SDK client from settings.

    IMPORTANT:
    - The Notion-Version is pinned (databases are created with inline properties).
    - SDK logs go through the standard "notion_client" logger, not its own console handler.
    """
    api_key = (settings.notion_api_key or "").strip()
    if not api_key:
        raise ConfigError("Notion API key is not set. Set NOTION_API_KEY in your .env.")

    return AsyncClient(
        auth=api_key,
        notion_version=settings.notion_version,
        timeout_ms=int(settings.timeout_seconds * 1000),
        logger=logging.getLogger("notion_client"),
    )


class NotionWorkspace:
    """
    WorkspaceClient backed by the Notion REST API.

    Stateless apart from the SDK client, so one instance can be shared by
    concurrent provisioning branches. Errors from the SDK propagate unchanged.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> NotionWorkspace:
        return cls(create_notion_client(settings))

    async def __aenter__(self) -> NotionWorkspace:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        close = getattr(self._client, "aclose", None)
        if callable(close):
            await close()

    async def _post(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        # Body goes out as built; SDK endpoint helpers filter keys per version.
        return await self._client.request(path=path, method="POST", body=body)

    async def create_page(self, *, parent_id: str, title: str, blocks: Sequence[ContentBlock]) -> str:
        body = page_create_body(parent_id=parent_id, title=title, blocks=blocks)
        logger.debug("POST pages parent=%s title=%r blocks=%d", parent_id, title, len(body["children"]))
        response = await self._post("pages", body)
        return str(response["id"])

    async def create_database(self, *, parent_id: str, title: str, columns: Sequence[Column]) -> str:
        body = database_create_body(parent_id=parent_id, title=title, columns=columns)
        logger.debug("POST databases parent=%s title=%r columns=%s", parent_id, title, list(body["properties"]))
        response = await self._post("databases", body)
        return str(response["id"])

    async def create_row(self, *, database_id: str, columns: Sequence[Column], values: RowValues) -> str:
        body = row_create_body(database_id=database_id, columns=columns, values=values)
        logger.debug("POST pages database=%s title=%r", database_id, values.title)
        response = await self._post("pages", body)
        return str(response["id"])
