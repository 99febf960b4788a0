"""SHELFMARK authors CLI: count, add and remove author records.

Commands
- ``count``  : Print the number of stored authors matching the given filters.
- ``add``    : Validate and store a new author; prints the new author id.
- ``remove`` : Delete an author by id.

Counts and ids go to **stdout**; field errors and notices go to **stderr**.

Failure modes
- Missing ``SHELFMARK_DB_URL`` → ``ClickException`` with a setup hint.
- Malformed URL or unsupported backend → ``ClickException``.
- Invalid author fields → one stderr line per field, exit code 1.
- Store failures (unreachable DB, unknown id) → ``ClickException``.

Examples
    $ shelfmark authors count --first-name John
    $ shelfmark authors count --has-death-date
    $ shelfmark authors add --first-name John --family-name Doe --born 1958-10-10
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click
import click_extra as clickx
from sqlalchemy.exc import ArgumentError

from shelfmark import config
from shelfmark.adapters.db.dialects import UnsupportedDialect
from shelfmark.bootstrap import bootstrap
from shelfmark.domain.author import AuthorRecord
from shelfmark.domain.errors import AuthorValidationError
from shelfmark.interfaces.document_store import StoreError
from shelfmark.service_layer.handlers import register_author, remove_author
from shelfmark.service_layer.queries import get_author_count

from .db import INVALID_URL_FORMAT_MSG
from .helpers import error, success

if TYPE_CHECKING:
    from shelfmark.interfaces.document_store import DocumentStore

T = TypeVar("T")

MISSING_DB_URL_MSG = (
    "SHELFMARK_DB_URL is not set.\n\n"
    "Set it before running this command, e.g.:\n"
    "  export SHELFMARK_DB_URL='sqlite+aiosqlite:///shelfmark.db'"
)

INVALID_AUTHOR_MSG = "Author not stored: fix the fields above and retry."


def _run(operation: Callable[[DocumentStore], Awaitable[T]]) -> T:
    """Run *operation* against a freshly bootstrapped store."""
    try:
        container = bootstrap()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    except (ArgumentError, UnsupportedDialect) as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e

    async def _main() -> T:
        try:
            return await operation(container.store)
        finally:
            await container.aclose()

    try:
        return asyncio.run(_main())
    except AuthorValidationError as e:
        for field_error in e.errors.values():
            error(field_error.message)
        raise click.ClickException(INVALID_AUTHOR_MSG) from e
    except StoreError as e:
        raise click.ClickException(str(e)) from e


@click.group(cls=clickx.ExtraGroup)
def authors() -> None:
    """Author record commands."""


@authors.command()
@click.option("--first-name", help="Match this exact first name.")
@click.option("--family-name", help="Match this exact family name.")
@click.option("--born", metavar="YYYY-MM-DD", help="Match this exact birth date.")
@click.option(
    "--has-death-date/--no-death-date",
    "has_death_date",
    default=None,
    help="Only authors with (or without) a known death date.",
)
def count(
    first_name: str | None,
    family_name: str | None,
    born: str | None,
    has_death_date: bool | None,
) -> None:
    """Print the number of stored authors matching the filters."""
    filters: dict[str, Any] = {}
    if first_name is not None:
        filters["first_name"] = first_name
    if family_name is not None:
        filters["family_name"] = family_name
    if born is not None:
        filters["date_of_birth"] = born
    if has_death_date is not None:
        filters["date_of_death"] = {"$exists": has_death_date}

    total = _run(lambda store: get_author_count(store, filters or None))
    click.echo(total)


@authors.command()
@click.option("--first-name", help="Given name (required, at most 100 characters).")
@click.option("--family-name", help="Family name (required, at most 100 characters).")
@click.option("--born", metavar="YYYY-MM-DD", help="Birth date.")
@click.option("--died", metavar="YYYY-MM-DD", help="Death date.")
def add(
    first_name: str | None,
    family_name: str | None,
    born: str | None,
    died: str | None,
) -> None:
    """Validate and store a new author, then print its id."""
    author = AuthorRecord(
        first_name=first_name,
        family_name=family_name,
        date_of_birth=born,
        date_of_death=died,
    )
    author_id = _run(lambda store: register_author(store, author))
    success(f"Stored {author.name} ({author.lifespan})")
    click.echo(author_id)


@authors.command()
@click.argument("author_id")
def remove(author_id: str) -> None:
    """Delete the author stored under AUTHOR_ID."""
    _run(lambda store: remove_author(store, author_id))
    success(f"Removed author {author_id}")
