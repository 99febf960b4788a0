"""Document store interface and related errors."""

from .document_store import (
    FILTER_OPERATORS,
    DocumentStore,
    FieldFilter,
    FilterClause,
)
from .errors import (
    AuthorNotFoundError,
    StoreError,
    StoreUnavailableError,
    UnsupportedFilterError,
)

__all__ = [
    "DocumentStore",
    "FieldFilter",
    "FilterClause",
    "FILTER_OPERATORS",
    "StoreError",
    "StoreUnavailableError",
    "UnsupportedFilterError",
    "AuthorNotFoundError",
]
