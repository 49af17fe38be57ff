# src/notion_scaffold/core/layout.py

"""
Static content of the provisioned structure.

Everything here is literal: page titles, checklist items, the store schema
and the seed row. Changing the layout means editing this module.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import Column, ColumnKind, ContentBlock, PagePlan

TASKS_HEADING = "Tasks"

STORE_TITLE = "Store Information"

STORE_COLUMNS: tuple[Column, ...] = (
    Column(name="Store", kind=ColumnKind.TITLE),
    Column(name="TotalCost", kind=ColumnKind.NUMBER, number_format="dollar"),
    Column(name="Create Date", kind=ColumnKind.DATE),
    Column(name="Last Modified", kind=ColumnKind.LAST_EDITED_TIME),
)

SEED_STORE_NAME = "Example Store"
SEED_TOTAL_COST = 0

WEEKLY_GROCERY_PAGES: tuple[PagePlan, ...] = (
    PagePlan(name="Grocery Shopping - Week 1", items=("milk", "eggs", "bread")),
    PagePlan(name="Grocery Shopping - Week 2", items=("chicken", "rice", "vegetables")),
    PagePlan(name="Grocery Shopping - Week 3", items=("pasta", "cheese", "tomatoes")),
)


def build_page_blocks(todo_items: Iterable[str]) -> list[ContentBlock]:
    """Heading, one unchecked task per item (in order), trailing spacer."""
    blocks = [ContentBlock.heading(TASKS_HEADING)]
    blocks.extend(ContentBlock.task(item) for item in todo_items)
    blocks.append(ContentBlock.spacer())
    return blocks
