# src/notion_scaffold/core/results.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CreateOutcome:
    """
    Result of one create-call: either the new object's ID or a failure reason.

    Exactly one of `id` / `error` is set.
    """

    id: str | None = None
    error: str | None = None

    @classmethod
    def created(cls, object_id: str) -> CreateOutcome:
        return cls(id=object_id)

    @classmethod
    def failed(cls, reason: str) -> CreateOutcome:
        return cls(error=reason or "unknown error")

    @property
    def ok(self) -> bool:
        return self.id is not None
