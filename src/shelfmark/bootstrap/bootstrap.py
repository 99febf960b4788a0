"""Wire the document store used by the entrypoints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shelfmark import config
from shelfmark.adapters.db.engine import make_engine
from shelfmark.adapters.document_store import SqlAlchemyDocumentStore
from shelfmark.adapters.id_generators import ULIDGenerator

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from shelfmark.interfaces.document_store import DocumentStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """Runtime wiring handed to entrypoints."""

    store: DocumentStore
    engine: AsyncEngine | None = None

    async def aclose(self) -> None:
        """Release pooled database connections, if any."""
        if self.engine is not None:
            await self.engine.dispose()


def build_store(engine: AsyncEngine) -> DocumentStore:
    """Build the SQL-backed document store with ULID author ids."""
    return SqlAlchemyDocumentStore(engine, id_generator=ULIDGenerator())


def bootstrap(url: str | None = None) -> AppContainer:
    """Build the application container.

    Args:
        url: Database URL; defaults to `SHELFMARK_DB_URL`.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and the variable is unset.
    """
    engine = make_engine(url or config.get_db_url())
    store = build_store(engine)
    logger.debug(
        "Using %s on %s",
        type(store).__name__,
        engine.url.render_as_string(hide_password=True),
    )
    return AppContainer(store=store, engine=engine)
