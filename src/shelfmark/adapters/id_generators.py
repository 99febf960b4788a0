"""ID generators for SHELFMARK author ids."""

import threading

from ulid import monotonic

from shelfmark.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are 26-character, lexicographically sortable identifiers made of a
    timestamp and a random component, which keeps author ids roughly in
    registration order. Backed by the `ulid-py` library.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class SimpleIdGenerator(IdGenerator):
    """Sequential, zero-padded ids.

    Note:
        Not suitable for production use; primarily for tests and demos.
    """

    def __init__(self, length: int = 26) -> None:
        self._counter = 0
        self._length = length

    def new_id(self) -> str:
        """Return the next id in the sequence."""
        self._counter += 1
        return f"{self._counter:0{self._length}d}"
