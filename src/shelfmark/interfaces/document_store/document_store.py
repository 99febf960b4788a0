"""Interface for the document store that persists and counts author records."""

from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from shelfmark.domain.author import AuthorRecord

#: One filter clause: an exact-match value, or a mapping of operator to operand
#: (e.g. ``{"$exists": True}`` or ``{"$gte": date(1950, 1, 1)}``).
FilterClause: TypeAlias = Any

#: Field name to clause. Clauses on different fields are combined with AND.
FieldFilter: TypeAlias = Mapping[str, FilterClause]

#: Operators understood by the bundled adapters.
FILTER_OPERATORS = frozenset(
    {"$exists", "$eq", "$ne", "$gt", "$gte", "$lt", "$lte", "$in"}
)


class DocumentStore(abc.ABC):
    """Interface for a store of author documents.

    Callers treat filters as opaque: a store interprets them, and must report
    filters it cannot interpret with `UnsupportedFilterError` rather than
    silently ignoring a clause.
    """

    @abc.abstractmethod
    async def count(self, filters: FieldFilter | None = None) -> int:
        """Count stored authors matching *filters*.

        Args:
            filters: Field filter; ``None`` or an empty mapping counts every
                stored author.

        Returns:
            int: The non-negative number of matching authors.

        Raises:
            UnsupportedFilterError: If a field or operator is not understood.
            StoreError: If the underlying store fails.
        """

    @abc.abstractmethod
    async def add(self, author: AuthorRecord) -> str:
        """Persist *author* and return its newly assigned id.

        The id is also set on ``author.author_id``.

        Raises:
            AuthorValidationError: If the record is invalid.
            StoreError: If the underlying store fails.
        """

    @abc.abstractmethod
    async def remove(self, author_id: str) -> None:
        """Delete the author stored under *author_id*.

        Raises:
            AuthorNotFoundError: If no author is stored under *author_id*.
            StoreError: If the underlying store fails.
        """
