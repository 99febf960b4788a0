"""SHELFMARK CLI entry point.

Defines the top-level ``shelfmark`` command (via Click-Extra) and registers
subcommands exposed by the project.

Currently available groups
- ``shelfmark authors``: count, add and remove author records.
- ``shelfmark db``: forward-only database management (upgrade/current/heads/history/status).

Examples
    $ shelfmark --version
    $ shelfmark db upgrade
    $ shelfmark authors count --has-death-date
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from shelfmark import __version__, config
from shelfmark.logging import config_console_handler, config_flight_recorder, log_startup

from .authors import authors as authors_group
from .db import db as db_group
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """SHELFMARK command-line interface.

    SHELFMARK keeps the author records of an online library catalogue:
    it validates person records, stores them, and answers filtered counts.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names, source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the flight recorder's log file.",
    default=None,
    envvar=config.LOG_PATH_ENV_VAR,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep recent log records at DEBUG granularity in memory and write them "
        "to --log-path when a WARNING/ERROR occurs. Console verbosity is unchanged."
    ),
    default=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L sqlalchemy=INFO -L aiosqlite=WARNING)."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING", "aiosqlite=WARNING"),
    show_default=True,
)
@clickx.pass_context
def shelfmark(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """SHELFMARK command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]

    if flight_recorder:
        if log_path is None:
            log_path = config.default_log_path()
        handlers.append(config_flight_recorder(path=log_path))

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
        db_url=os.environ.get(config.DB_URL_ENV_VAR),
    )

    ctx.call_on_close(logging.shutdown)


shelfmark.add_command(authors_group)
shelfmark.add_command(db_group)
