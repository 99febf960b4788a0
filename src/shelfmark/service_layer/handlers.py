"""Write-side operations on author records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shelfmark.domain.author import AuthorRecord
    from shelfmark.interfaces.document_store import DocumentStore

logger = logging.getLogger(__name__)


async def register_author(store: DocumentStore, author: AuthorRecord) -> str:
    """Validate *author* and persist it.

    Returns:
        str: The id assigned by the store (also set on ``author.author_id``).

    Raises:
        AuthorValidationError: If any field is invalid; the store is not touched.
        StoreError: If the store fails.
    """
    author.validate().raise_for_errors()
    author_id = await store.add(author)
    logger.info("Registered author %s (%s)", author_id, author.name)
    return author_id


async def remove_author(store: DocumentStore, author_id: str) -> None:
    """Remove the author stored under *author_id*.

    Raises:
        AuthorNotFoundError: If the store holds no such author.
        StoreError: If the store fails.
    """
    await store.remove(author_id)
    logger.info("Removed author %s", author_id)
