"""Contains concrete implementations of the DocumentStore interface."""

from .in_memory import InMemoryDocumentStore
from .sqlalchemy_store import SqlAlchemyDocumentStore

__all__ = [
    "InMemoryDocumentStore",
    "SqlAlchemyDocumentStore",
]
