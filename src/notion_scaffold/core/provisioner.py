# src/notion_scaffold/core/provisioner.py

from __future__ import annotations

"""
Structure provisioner.

Creates, under one parent page, a set of child pages. Each child gets:
- a "Tasks" heading, one unchecked to-do per item and a spacer,
- a nested "Store Information" database with a fixed schema,
- one seed row in that database.

The chains for different child pages run concurrently; the three steps of
one chain run in order because each needs the ID from the previous one.
Remote failures are logged and returned as failed outcomes, never raised.
"""

import asyncio
import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from ..notion.errors import describe_error
from .layout import (
    SEED_STORE_NAME,
    SEED_TOTAL_COST,
    STORE_COLUMNS,
    STORE_TITLE,
    WEEKLY_GROCERY_PAGES,
    build_page_blocks,
)
from .models import PagePlan, RowValues
from .ports import WorkspaceClient
from .results import CreateOutcome

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class StructureProvisioner:
    def __init__(
        self,
        workspace: WorkspaceClient,
        *,
        parent_page_id: str,
        clock: Callable[[], datetime] = _utc_now,
        pages: Sequence[PagePlan] = WEEKLY_GROCERY_PAGES,
    ) -> None:
        self.workspace = workspace
        self.parent_page_id = parent_page_id
        self.clock = clock
        self.pages = tuple(pages)

    async def create_child_page(
        self,
        parent_id: str,
        page_name: str,
        todo_items: Sequence[str] = (),
    ) -> CreateOutcome:
        """
        Create one child page with its checklist, then its store database.

        The page outcome does not depend on the database step: a page that
        was created is reported as created even if its database fails.
        """
        blocks = build_page_blocks(todo_items)
        try:
            page_id = await self.workspace.create_page(parent_id=parent_id, title=page_name, blocks=blocks)
        except Exception as e:
            reason = describe_error(e)
            logger.error("Error creating child page %s: %s", page_name, reason)
            logger.debug("create_page failed page=%s", page_name, exc_info=True)
            return CreateOutcome.failed(reason)

        logger.info("Created child page: %s", page_name)

        database = await self.create_table_database(page_id, page_name)
        if not database.ok:
            # TODO: surface store failures in the page outcome once callers need a partial-success status.
            logger.debug("Page %s kept without store database", page_name)

        return CreateOutcome.created(page_id)

    async def create_table_database(self, page_id: str, page_name: str) -> CreateOutcome:
        try:
            database_id = await self.workspace.create_database(
                parent_id=page_id,
                title=STORE_TITLE,
                columns=STORE_COLUMNS,
            )
        except Exception as e:
            reason = describe_error(e)
            logger.error("Error creating database in %s: %s", page_name, reason)
            logger.debug("create_database failed page=%s", page_name, exc_info=True)
            return CreateOutcome.failed(reason)

        logger.info("Created table database in page: %s", page_name)

        await self.add_row_to_database(database_id, SEED_STORE_NAME, SEED_TOTAL_COST)
        return CreateOutcome.created(database_id)

    async def add_row_to_database(self, database_id: str, store_name: str, total_cost: float) -> CreateOutcome:
        # Captured once; this is the row's "Create Date".
        values = RowValues(title=store_name, total_cost=total_cost, created_at=self.clock())
        try:
            row_id = await self.workspace.create_row(
                database_id=database_id,
                columns=STORE_COLUMNS,
                values=values,
            )
        except Exception as e:
            reason = describe_error(e)
            logger.error("Error adding row to database %s: %s", database_id, reason)
            logger.debug("create_row failed database=%s", database_id, exc_info=True)
            return CreateOutcome.failed(reason)

        logger.info("Added row to database: %s", store_name)
        return CreateOutcome.created(row_id)

    async def create_weekly_grocery_pages(self, parent_id: str) -> list[str | None]:
        """
        Provision every configured page concurrently.

        Returns one entry per page, in configuration order: the page ID, or
        None if that page could not be created. If the dispatch itself blows
        up, every entry is None.
        """
        try:
            outcomes = await asyncio.gather(
                *(self.create_child_page(parent_id, page.name, page.items) for page in self.pages)
            )
        except Exception:
            logger.exception("Error creating weekly grocery pages")
            return [None] * len(self.pages)

        page_ids = [o.id for o in outcomes]
        logger.info("Created weekly grocery pages with IDs: %s", page_ids)
        return page_ids

    async def create_structure(self) -> list[str | None]:
        page_ids = await self.create_weekly_grocery_pages(self.parent_page_id)
        failed = sum(1 for p in page_ids if p is None)
        if failed:
            logger.warning("Structure creation completed with %d of %d pages failed.", failed, len(page_ids))
        else:
            logger.info("Structure creation completed!")
        return page_ids
