# src/notion_scaffold/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HTTP_LOGGERS = ("httpx", "httpcore", "notion_client")


class _ProgressFilter(logging.Filter):
    """
    Console shows what a person running the script needs to see:
    which pages, databases and rows were created, and which failed.
    HTTP libraries only get through on WARNING+, everything else on ERROR+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("notion_scaffold"):
            return True
        if record.name.startswith(_HTTP_LOGGERS):
            return record.levelno >= logging.WARNING
        return record.levelno >= logging.ERROR


def _console_handler(level: int, fmt: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.addFilter(_ProgressFilter())
    return handler


def _file_handler(path: Path, level: int, fmt: logging.Formatter) -> logging.Handler:
    handler = logging.FileHandler(str(path), encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(fmt)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/notion-scaffold",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route one provisioning run to stderr and to `<log_dir>/scaffold.log`.

    The file keeps the DEBUG request lines and tracebacks, so a page that
    failed in a run can be diagnosed afterwards. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "scaffold.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    root.addHandler(_console_handler(console_level, fmt))
    root.addHandler(_file_handler(log_file, file_level, fmt))

    # SDK deprecation warnings land in the file as 'py.warnings'.
    logging.captureWarnings(True)

    return log_file
