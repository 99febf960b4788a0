"""In-memory implementation of the DocumentStore interface."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from shelfmark.interfaces.document_store import (
    AuthorNotFoundError,
    DocumentStore,
    FieldFilter,
)

from .filters import matches, parse_filter

if TYPE_CHECKING:
    from shelfmark.domain.author import AuthorRecord
    from shelfmark.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class InMemoryDocumentStore(DocumentStore):
    """In-memory implementation of the DocumentStore interface.

    This implementation is intended for testing and development purposes only.
    It does not persist data and is not suitable for production use.
    """

    def __init__(self, id_generator: IdGenerator) -> None:
        self._id_generator = id_generator
        self._documents: dict[str, dict[str, Any]] = {}  # author_id: document

    async def count(self, filters: FieldFilter | None = None) -> int:
        conditions = parse_filter(filters)
        total = sum(1 for doc in self._documents.values() if matches(doc, conditions))
        logger.debug("Counted %d author(s) for filter %r", total, filters)
        return total

    async def add(self, author: AuthorRecord) -> str:
        document = author.to_document()
        author_id = self._id_generator.new_id()
        self._documents[author_id] = {**document, "author_id": author_id}
        author.author_id = author_id
        logger.debug("Stored author %s", author_id)
        return author_id

    async def remove(self, author_id: str) -> None:
        if author_id not in self._documents:
            raise AuthorNotFoundError(author_id)
        del self._documents[author_id]
        logger.debug("Removed author %s", author_id)
