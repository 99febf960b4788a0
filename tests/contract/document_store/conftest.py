"""Fixtures for DocumentStore contract tests."""

from collections.abc import Iterable

import pytest
import pytest_asyncio

from shelfmark.adapters.document_store import (
    InMemoryDocumentStore,
    SqlAlchemyDocumentStore,
)
from shelfmark.adapters.id_generators import SimpleIdGenerator
from shelfmark.interfaces.document_store import DocumentStore

# pylint: disable=redefined-outer-name


@pytest.fixture(params=["memory", "sqlite"])
def document_store(request: pytest.FixtureRequest) -> Iterable[DocumentStore]:
    """Return an empty DocumentStore for the requested backend.

    Supported params:
      - `"memory"` → InMemoryDocumentStore
      - `"sqlite"` → SqlAlchemyDocumentStore on the `sqlite_engine` fixture

    Extend by adding new identifiers to `params` and branching below to
    construct the corresponding backend.
    """
    match request.param:
        case "memory":
            yield InMemoryDocumentStore(SimpleIdGenerator())
        case "sqlite":
            engine = request.getfixturevalue("sqlite_engine")
            yield SqlAlchemyDocumentStore(engine, SimpleIdGenerator())
        case _:
            raise ValueError(f"unknown document store type: {request.param}")


@pytest_asyncio.fixture
async def populated_store(document_store, sample_authors) -> DocumentStore:
    """The requested store holding the four sample authors."""
    for author in sample_authors:
        await document_store.add(author)
    return document_store
