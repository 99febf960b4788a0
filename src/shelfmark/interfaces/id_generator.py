"""Interface for author id generators."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for a generator of store-assigned author ids."""

    @abc.abstractmethod
    def new_id(self) -> str:
        """Generate a new unique identifier."""
