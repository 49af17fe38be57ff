# src/notion_scaffold/notion/payloads.py

"""
Pure builders for Notion API request bodies.

No I/O here: each function maps domain values onto the JSON shapes the
Notion REST API expects, so they can be asserted on directly in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from ..core.models import BlockKind, Column, ColumnKind, ContentBlock, RowValues


def rich_text(content: str) -> list[dict[str, Any]]:
    if not content:
        return []
    return [{"type": "text", "text": {"content": content}}]


def notion_date(value: datetime) -> str:
    """ISO-8601 in UTC with milliseconds and a 'Z' suffix (e.g. 2024-05-01T09:30:00.000Z)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def block_to_notion(block: ContentBlock) -> dict[str, Any]:
    if block.kind == BlockKind.HEADING:
        return {
            "object": "block",
            "type": "heading_2",
            "heading_2": {"rich_text": rich_text(block.text)},
        }
    if block.kind == BlockKind.TASK:
        return {
            "object": "block",
            "type": "to_do",
            "to_do": {"rich_text": rich_text(block.text), "checked": bool(block.checked)},
        }
    if block.kind == BlockKind.SPACER:
        return {
            "object": "block",
            "type": "paragraph",
            "paragraph": {"rich_text": []},
        }
    raise ValueError(f"Unsupported block kind: {block.kind!r}")


def page_create_body(*, parent_id: str, title: str, blocks: Sequence[ContentBlock]) -> dict[str, Any]:
    return {
        "parent": {"type": "page_id", "page_id": parent_id},
        "properties": {
            "title": {"title": [{"text": {"content": title}}]},
        },
        "children": [block_to_notion(b) for b in blocks],
    }


def column_to_notion(column: Column) -> dict[str, Any]:
    if column.kind == ColumnKind.NUMBER:
        config: dict[str, Any] = {"format": column.number_format} if column.number_format else {}
    else:
        config = {}
    return {"type": column.kind.value, column.kind.value: config}


def database_create_body(*, parent_id: str, title: str, columns: Sequence[Column]) -> dict[str, Any]:
    return {
        "parent": {"type": "page_id", "page_id": parent_id},
        "title": rich_text(title),
        "properties": {c.name: column_to_notion(c) for c in columns},
    }


def row_create_body(*, database_id: str, columns: Sequence[Column], values: RowValues) -> dict[str, Any]:
    """
    Fill each writable column from `values` by column kind.

    Server-maintained columns (last_edited_time) are never sent.
    """
    properties: dict[str, Any] = {}
    for column in columns:
        if not column.writable:
            continue
        if column.kind == ColumnKind.TITLE:
            properties[column.name] = {"title": [{"text": {"content": values.title}}]}
        elif column.kind == ColumnKind.NUMBER:
            properties[column.name] = {"number": values.total_cost}
        elif column.kind == ColumnKind.DATE:
            properties[column.name] = {"date": {"start": notion_date(values.created_at)}}

    return {
        "parent": {"database_id": database_id},
        "properties": properties,
    }
