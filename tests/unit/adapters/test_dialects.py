"""Unit tests for dialect normalization and async URL handling."""

import pytest

from shelfmark.adapters.db.dialects import DialectName, UnsupportedDialect, to_async_url
from shelfmark.adapters.db.engine import is_sqlite


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("postgres", DialectName.POSTGRES),
        ("postgresql+psycopg", DialectName.POSTGRES),
        ("PG", DialectName.POSTGRES),
        ("sqlite", DialectName.SQLITE),
        (" sqlite+aiosqlite ", DialectName.SQLITE),
    ],
)
def test_from_string_normalizes_aliases(raw, expected):
    """Aliases and driver-qualified names map to the base dialect."""
    assert DialectName.from_string(raw) is expected


@pytest.mark.parametrize("raw", ["mysql", "", "oracle+cx_oracle"])
def test_from_string_rejects_unsupported(raw):
    """Anything else is refused."""
    with pytest.raises(UnsupportedDialect):
        DialectName.from_string(raw)


@pytest.mark.parametrize(
    "url, drivername",
    [
        ("sqlite:///shelf.db", "sqlite+aiosqlite"),
        ("sqlite+aiosqlite:///shelf.db", "sqlite+aiosqlite"),
        ("postgresql://u:p@localhost/shelf", "postgresql+psycopg"),
        ("postgresql+asyncpg://u:p@localhost/shelf", "postgresql+asyncpg"),
        ("sqlite+pysqlite:///shelf.db", "sqlite+aiosqlite"),
        ("postgresql+psycopg2://u:p@localhost/shelf", "postgresql+psycopg"),
    ],
)
def test_to_async_url_uses_an_async_driver(url, drivername):
    """Known async drivers are kept; missing or sync ones become the default."""
    assert to_async_url(url).drivername == drivername


def test_to_async_url_keeps_the_database():
    """The rest of the URL is untouched."""
    assert to_async_url("sqlite:///shelf.db").database == "shelf.db"


def test_is_sqlite():
    """is_sqlite looks at the backend only."""
    assert is_sqlite("sqlite:///shelf.db")
    assert not is_sqlite("postgresql://u:p@localhost/shelf")


def test_to_async_url_rejects_other_backends():
    """A supported URL shape for an unsupported backend is refused."""
    with pytest.raises(UnsupportedDialect):
        to_async_url("mysql://u:p@localhost/shelf")
