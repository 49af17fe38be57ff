# src/notion_scaffold/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole run, built once and passed down.
- No secrets required at import time; `validate()` is the startup gate.
- Legacy unprefixed names (NOTION_API_KEY, PARENT_PAGE_ID) keep working.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "SCAFFOLD"

DEFAULT_NOTION_VERSION = "2022-06-28"


class ConfigError(RuntimeError):
    """Raised when required configuration is missing or malformed."""


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Notion ----
    notion_api_key: str | None
    parent_page_id: str | None
    notion_version: str
    timeout_seconds: float

    # ---- Logging ----
    log_level: str
    log_dir: Path

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(override=False)

        notion_api_key = _first_env(_k("NOTION_API_KEY"), "NOTION_API_KEY", default=None)
        parent_page_id = _first_env(_k("PARENT_PAGE_ID"), "PARENT_PAGE_ID", default=None)

        return Settings(
            notion_api_key=notion_api_key.strip() if notion_api_key else None,
            parent_page_id=parent_page_id.strip() if parent_page_id else None,
            notion_version=_env(_k("NOTION_VERSION"), DEFAULT_NOTION_VERSION).strip() or DEFAULT_NOTION_VERSION,
            timeout_seconds=max(1.0, _env_float(_k("TIMEOUT_SECONDS"), 60.0)),
            log_level=_env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO",
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/notion-scaffold")),
        )

    def validate(self) -> None:
        """Fail fast when the credential or the parent page is missing."""
        missing: list[str] = []
        if not self.notion_api_key:
            missing.append("NOTION_API_KEY")
        if not self.parent_page_id:
            missing.append("PARENT_PAGE_ID")
        if missing:
            raise ConfigError(
                "Missing required configuration: "
                + ", ".join(missing)
                + f" (set them in .env, optionally with the {ENV_PREFIX}_ prefix)."
            )


def get_settings() -> Settings:
    return Settings.from_env()
