"""Parsing of ``NAME=LEVEL`` logger-level CLI options.

Values arrive either as repeated options or as a single comma/space-separated
string (from an environment variable). Each item names a logger and a
standard level name.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {
    "sqlalchemy": logging.WARNING,
    "alembic": logging.WARNING,
    "aiosqlite": logging.WARNING,
}


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    chunks = value if isinstance(value, (tuple, list)) else [value]
    return [item for chunk in chunks for item in re.split(r"[,\s]+", chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones.
    Level names are case-insensitive.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name or not level_name:
            raise click.BadParameter(f"expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            raise click.BadParameter(f"unknown log level {level_name!r} for {name!r}")
        levels[name] = level
    return levels
