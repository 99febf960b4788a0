"""Logging setup for the SHELFMARK CLI.

Console records go to stderr through Rich, so stdout carries only counts
and author ids. The optional flight recorder keeps recent DEBUG records
(SQL from ``sqlalchemy.engine``, store calls, migration steps) in memory
and writes them to a file once a WARNING or worse is logged.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "shelfmark"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

FLIGHT_RECORDER_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d  %(message)s"


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag console records from the database stack with their library name.

    ``sqlalchemy.engine.Engine`` becomes ``[sqlalchemy]``, ``aiosqlite``
    stays ``[aiosqlite]``; SHELFMARK's own records get no tag. Nothing is
    dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.split(".", 1)[0]
        record.prefix = "" if top == PROJECT_PREFIX else f"[{top}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Rich handler on stderr for the ``-v``/``-q`` console level.

    Debug mode lowers the level to DEBUG and shows time, logger and source
    location instead of the library tag.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Buffer up to *capacity* records; write them to *path* on *flush_level*.

    The file is opened lazily and truncated, so a run that never warns
    leaves no file and a run that does replaces the previous one.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def describe_database(url: str | None) -> str:
    """Password-free description of *url* for logs, e.g. ``sqlite (sqlite+aiosqlite:///shelf.db)``."""
    if not url:
        return "<not configured>"
    try:
        parsed = make_url(url)
    except ArgumentError:
        return "<not a database URL>"
    return f"{parsed.get_backend_name()} ({parsed.render_as_string(hide_password=True)})"


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    logger_levels: dict[str, int],
    db_url: str | None,
) -> None:
    """Log which database this run targets and how logging is wired.

    The INFO line names the version, console level and flight-recorder
    state; DEBUG lines add the database, the handlers and the per-logger
    overrides so a flight-recorder file is self-describing.
    """
    logger.info(
        "SHELFMARK %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )
    logger.debug("Database: %s", describe_database(db_url))
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug("Flight recorder path: %s", log_path or "<none>")
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
