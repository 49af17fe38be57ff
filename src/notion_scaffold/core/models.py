# src/notion_scaffold/core/models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class BlockKind(StrEnum):
    HEADING = "heading"
    TASK = "task"
    SPACER = "spacer"


@dataclass(frozen=True, slots=True)
class ContentBlock:
    """
    One block of page content.

    Blocks are immutable and submitted in one batch with their page:
    - HEADING: section title (rendered as a level-2 heading)
    - TASK: checklist item, always created unchecked
    - SPACER: empty paragraph
    """

    kind: BlockKind
    text: str = ""
    checked: bool = False

    @classmethod
    def heading(cls, text: str) -> ContentBlock:
        return cls(kind=BlockKind.HEADING, text=text)

    @classmethod
    def task(cls, text: str) -> ContentBlock:
        return cls(kind=BlockKind.TASK, text=text, checked=False)

    @classmethod
    def spacer(cls) -> ContentBlock:
        return cls(kind=BlockKind.SPACER)


class ColumnKind(StrEnum):
    TITLE = "title"
    NUMBER = "number"
    DATE = "date"
    LAST_EDITED_TIME = "last_edited_time"  # server-maintained, read-only


@dataclass(frozen=True, slots=True)
class Column:
    name: str
    kind: ColumnKind
    number_format: str | None = None

    @property
    def writable(self) -> bool:
        return self.kind != ColumnKind.LAST_EDITED_TIME


@dataclass(frozen=True, slots=True)
class RowValues:
    """Values for the writable columns of a store row."""

    title: str
    total_cost: float
    created_at: datetime


@dataclass(frozen=True, slots=True)
class PagePlan:
    """A child page to provision: its title and checklist labels."""

    name: str
    items: tuple[str, ...] = ()
