"""Errors raised by DocumentStore implementations."""


class StoreError(Exception):
    """Base class for DocumentStore errors.

    Store errors are surfaced to callers unmodified; retry policy belongs to
    the caller.
    """


class StoreUnavailableError(StoreError):
    """Raised when the backing store cannot be reached."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Document store unavailable: {reason}")
        self.reason = reason


class UnsupportedFilterError(StoreError):
    """Raised when a filter names an unknown field or operator.

    Attributes:
        field (str): The field the offending clause applies to.
        detail (str): What was not understood.
    """

    def __init__(self, field: str, detail: str) -> None:
        super().__init__(f"Unsupported filter on '{field}': {detail}")
        self.field = field
        self.detail = detail


class AuthorNotFoundError(StoreError):
    """Raised when a store is asked to remove an author id it does not hold.

    Attributes:
        author_id (str): The author id that was not found.
    """

    def __init__(self, author_id: str) -> None:
        super().__init__(f"Author ID '{author_id}' not found in document store.")
        self.author_id = author_id
