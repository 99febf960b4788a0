"""Async database engine factory.

This module centralizes creation of SQLAlchemy `AsyncEngine` objects for the
document store and applies backend-specific tuning:

- **SQLite** (``aiosqlite``): adds connection PRAGMAs to enforce foreign
  keys, enable WAL, and tune durability/temporary storage.
- **PostgreSQL** (``psycopg``): no tuning applied here.

URLs without an async driver get the dialect's default async driver
(see `shelfmark.adapters.db.dialects.to_async_url`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine

from .dialects import DialectName, to_async_url

if TYPE_CHECKING:
    from sqlalchemy.engine import URL
    from sqlalchemy.ext.asyncio import AsyncEngine


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string corresponds to SQLite."""
    return to_async_url(url).get_backend_name() == DialectName.SQLITE.value


def make_engine(url: str | URL, *, echo: bool = False) -> AsyncEngine:
    """Create an `AsyncEngine` for the given URL.

    If the backend is SQLite, applies a set of PRAGMAs on every new
    connection:
        - ``foreign_keys=ON`` (enforce referential integrity)
        - ``journal_mode=WAL`` (write-ahead logging for concurrency)
        - ``synchronous=NORMAL`` (balanced durability)
        - ``temp_store=MEMORY`` (reduce temp file I/O)

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: If True, log SQL statements.

    Returns:
        AsyncEngine: Configured SQLAlchemy async engine.

    Raises:
        UnsupportedDialect: if the backend is not supported.
    """

    async_url = to_async_url(url)
    engine = create_async_engine(async_url, echo=echo)

    if is_sqlite(async_url):

        @event.listens_for(engine.sync_engine, "connect")
        def _sqlite_pragmas(dbapi_conn, conn_record):  # type: ignore # pylint: disable=W0613
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
            cur.execute("PRAGMA temp_store=MEMORY;")
            cur.close()

    return engine
