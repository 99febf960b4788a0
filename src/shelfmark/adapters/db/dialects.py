"""Supported database dialects and their async drivers.

The SQLAlchemy document store runs on SQLAlchemy's asyncio extension, so every
URL must name an async driver. `DialectName` normalizes the backend part of a
URL, and `to_async_url` puts the default async driver in place when a URL
names a backend only or a synchronous driver (e.g. ``sqlite:///shelf.db`` or
``sqlite+pysqlite:///shelf.db`` -> ``sqlite+aiosqlite:///shelf.db``).
"""

from __future__ import annotations

from enum import Enum

from sqlalchemy.engine import URL, make_url


class UnsupportedDialect(Exception):
    """Raised when an unsupported database dialect is encountered."""


class DialectName(str, Enum):
    """Enumeration of supported SQLAlchemy dialect names.

    Attributes:
        POSTGRES: PostgreSQL dialect (``"postgresql"``), async driver ``psycopg``.
        SQLITE:   SQLite dialect (``"sqlite"``), async driver ``aiosqlite``.
    """

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @property
    def async_driver(self) -> str:
        """Name of the default async DBAPI driver for this dialect."""
        return _ASYNC_DRIVERS[self][0]

    def is_async_driver(self, driver: str) -> bool:
        """True if *driver* is an async DBAPI driver known for this dialect."""
        return driver in _ASYNC_DRIVERS[self]

    @classmethod
    def from_string(cls, dialect_str: str) -> DialectName:
        """Normalize and convert an arbitrary dialect string to DialectName.

        Accepts common aliases and driver-qualified names (e.g., 'postgres',
        'postgresql+psycopg', 'sqlite', 'sqlite+aiosqlite').

        Raises:
            UnsupportedDialect: if the dialect is not recognized or supported.
        """

        raw = (dialect_str or "").strip().lower()
        base = raw.split("+", 1)[0]

        if base in {"postgres", "postgresql", "pg"}:
            return cls.POSTGRES
        if base == "sqlite":
            return cls.SQLITE

        raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}")


# Default first.
_ASYNC_DRIVERS = {
    DialectName.POSTGRES: ("psycopg", "psycopg_async", "asyncpg"),
    DialectName.SQLITE: ("aiosqlite",),
}


def to_async_url(url: str | URL) -> URL:
    """Return *url* with an async driver.

    Known async drivers are kept. A missing or synchronous driver (e.g.
    ``pysqlite``, ``psycopg2``) is replaced by the dialect default.

    Args:
        url: A database URL string or SQLAlchemy :class:`URL`.

    Returns:
        URL: The URL with ``drivername`` set to ``<dialect>+<async driver>``.

    Raises:
        UnsupportedDialect: if the backend is not supported.
        ArgumentError: if *url* is not a database URL.
    """
    parsed = make_url(url)
    dialect = DialectName.from_string(parsed.get_backend_name())
    if "+" in parsed.drivername and dialect.is_async_driver(parsed.get_driver_name()):
        return parsed.set(drivername=f"{dialect.value}+{parsed.get_driver_name()}")
    return parsed.set(drivername=f"{dialect.value}+{dialect.async_driver}")
