# tests/test_cli.py

from __future__ import annotations

import logging

import pytest

from notion_scaffold.cli import main as cli_main
from notion_scaffold.config import Settings
from notion_scaffold.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _settings(tmp_path, **overrides) -> Settings:
    values = dict(
        notion_api_key="secret_test",
        parent_page_id="parent-page",
        notion_version="2022-06-28",
        timeout_seconds=5.0,
        log_level="INFO",
        log_dir=tmp_path / "logs",
    )
    values.update(overrides)
    return Settings(**values)


def test_setup_logging_writes_file(tmp_path) -> None:
    log_file = setup_logging(log_dir=tmp_path)
    logging.getLogger("notion_scaffold.test").info("hello file")

    for h in logging.getLogger().handlers:
        h.flush()
    assert log_file == tmp_path / "scaffold.log"
    assert "hello file" in log_file.read_text("utf-8")


def test_main_exits_2_when_config_missing(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(cli_main, "get_settings", lambda: _settings(tmp_path, notion_api_key=None))

    async def must_not_run(settings):
        raise AssertionError("provisioning must not start")

    monkeypatch.setattr(cli_main, "run", must_not_run)

    assert cli_main.main() == 2


def test_main_runs_provisioning_once(tmp_path, monkeypatch) -> None:
    seen: list[Settings] = []

    async def fake_run(settings):
        seen.append(settings)
        return [None, None, None]

    monkeypatch.setattr(cli_main, "get_settings", lambda: _settings(tmp_path))
    monkeypatch.setattr(cli_main, "run", fake_run)

    assert cli_main.main() == 0
    assert len(seen) == 1
    assert seen[0].parent_page_id == "parent-page"


def test_console_shows_own_logs_and_only_http_warnings(tmp_path, capsys) -> None:
    setup_logging(log_dir=tmp_path)

    logging.getLogger("notion_scaffold.core.provisioner").info("Created child page: Week 1")
    logging.getLogger("httpx").info("HTTP Request: POST https://api.notion.com/v1/pages")
    logging.getLogger("notion_client").warning("retrying")

    err = capsys.readouterr().err
    assert "Created child page: Week 1" in err
    assert "HTTP Request" not in err
    assert "retrying" in err
