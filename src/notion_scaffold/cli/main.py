# src/notion_scaffold/cli/main.py

"""
CLI entrypoint.

Loads settings, initializes logging, validates configuration, then runs the
provisioner once against the configured parent page and exits.
"""

from __future__ import annotations

import asyncio
import logging

from ..config import ConfigError, Settings, get_settings
from ..core.provisioner import StructureProvisioner
from ..logging_setup import setup_logging
from ..notion.workspace import NotionWorkspace

logger = logging.getLogger(__name__)


async def run(settings: Settings) -> list[str | None]:
    async with NotionWorkspace.from_settings(settings) as workspace:
        provisioner = StructureProvisioner(workspace, parent_page_id=str(settings.parent_page_id))
        return await provisioner.create_structure()


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    # keep HTTP libs quiet in the file as well
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    try:
        settings.validate()
    except ConfigError as e:
        logger.error("%s", e)
        return 2

    logger.info("Provisioning structure under parent page %s...", settings.parent_page_id)
    asyncio.run(run(settings))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
