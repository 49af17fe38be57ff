# tests/conftest.py

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from notion_scaffold.core.provisioner import StructureProvisioner

from .fakes import FakeWorkspace

FIXED_NOW = datetime(2024, 5, 1, 9, 30, 15, 123000, tzinfo=UTC)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object.

    A SimpleNamespace rather than the real Settings keeps tests independent
    of the environment and of any local .env file.
    """
    return SimpleNamespace(
        notion_api_key="secret_test",
        parent_page_id="parent-page",
        notion_version="2022-06-28",
        timeout_seconds=5.0,
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def workspace() -> FakeWorkspace:
    return FakeWorkspace()


@pytest.fixture()
def clock_calls() -> list[datetime]:
    return []


@pytest.fixture()
def provisioner(workspace: FakeWorkspace, settings: SimpleNamespace, clock_calls: list[datetime]) -> StructureProvisioner:
    def clock() -> datetime:
        clock_calls.append(FIXED_NOW)
        return FIXED_NOW

    return StructureProvisioner(workspace, parent_page_id=settings.parent_page_id, clock=clock)
