"""Read-side operations on stored authors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shelfmark.interfaces.document_store import DocumentStore, FieldFilter

logger = logging.getLogger(__name__)


async def get_author_count(
    store: DocumentStore, filters: FieldFilter | None = None
) -> int:
    """Count stored authors matching *filters*.

    A passthrough: *filters* reaches ``store.count`` unmodified and the
    store's answer is returned unchanged. Store errors propagate.

    Args:
        store: The document store holding author records.
        filters: Optional field filter, e.g. ``{"first_name": "John"}`` or
            ``{"date_of_death": {"$exists": True}}``. ``None`` counts all.

    Returns:
        int: Number of matching authors.
    """
    count = await store.count(filters)
    logger.debug("Author count for %r: %d", filters, count)
    return count
