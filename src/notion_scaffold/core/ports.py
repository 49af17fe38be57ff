# src/notion_scaffold/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The provisioner depends on this Protocol instead of the Notion SDK.
This keeps the remote service swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Protocol

from .models import Column, ContentBlock, RowValues


class WorkspaceClient(Protocol):
    """
    Create-only access to a document workspace.

    Every method returns the opaque ID assigned by the service and raises
    on any remote failure (auth, permissions, validation, network).
    """

    async def create_page(self, *, parent_id: str, title: str, blocks: Sequence[ContentBlock]) -> str: ...

    async def create_database(self, *, parent_id: str, title: str, columns: Sequence[Column]) -> str: ...

    async def create_row(self, *, database_id: str, columns: Sequence[Column], values: RowValues) -> str: ...
