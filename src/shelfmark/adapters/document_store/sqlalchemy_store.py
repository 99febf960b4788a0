"""Implementation of DocumentStore using SQLAlchemy's asyncio extension."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, delete, func, insert, or_, select, true
from sqlalchemy.exc import OperationalError

from shelfmark.interfaces.document_store import (
    AuthorNotFoundError,
    DocumentStore,
    FieldFilter,
    StoreUnavailableError,
)

from .filters import Condition, parse_filter
from .schema import authors

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine
    from sqlalchemy.sql.elements import ColumnElement

    from shelfmark.domain.author import AuthorRecord
    from shelfmark.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class SqlAlchemyDocumentStore(DocumentStore):
    """DocumentStore backed by the ``authors`` table (Postgres or SQLite).

    Each call runs on its own connection checked out from *engine*; writes
    commit before returning. Driver connectivity failures surface as
    `StoreUnavailableError`.
    """

    def __init__(self, engine: AsyncEngine, id_generator: IdGenerator):
        self.engine = engine
        self._id_generator = id_generator

    async def count(self, filters: FieldFilter | None = None) -> int:
        stmt = (
            select(func.count())
            .select_from(authors)
            .where(and_(true(), *(_to_sql(c) for c in parse_filter(filters))))
        )
        try:
            async with self.engine.connect() as conn:
                total = (await conn.execute(stmt)).scalar_one()
        except OperationalError as e:
            raise StoreUnavailableError(str(e.orig)) from e
        logger.debug("Counted %d author(s) for filter %r", total, filters)
        return int(total)

    async def add(self, author: AuthorRecord) -> str:
        document = author.to_document()
        author_id = self._id_generator.new_id()
        try:
            async with self.engine.begin() as conn:
                await conn.execute(
                    insert(authors).values(author_id=author_id, **document)
                )
        except OperationalError as e:
            raise StoreUnavailableError(str(e.orig)) from e
        author.author_id = author_id
        logger.debug("Stored author %s", author_id)
        return author_id

    async def remove(self, author_id: str) -> None:
        stmt = delete(authors).where(authors.c.author_id == author_id)
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(stmt)
        except OperationalError as e:
            raise StoreUnavailableError(str(e.orig)) from e
        if result.rowcount == 0:
            raise AuthorNotFoundError(author_id)
        logger.debug("Removed author %s", author_id)


def _to_sql(condition: Condition) -> ColumnElement[bool]:  # pylint: disable=too-many-return-statements
    column = authors.c[condition.field]
    op, operand = condition.op, condition.operand
    if op == "$exists":
        return column.is_not(None) if operand else column.is_(None)
    if op == "$eq":
        return column.is_(None) if operand is None else column == operand
    if op == "$ne":
        if operand is None:
            return column.is_not(None)
        return or_(column != operand, column.is_(None))
    if op == "$in":
        return column.in_([value for value in operand if value is not None])
    comparisons: dict[str, Any] = {
        "$gt": column.__gt__,
        "$gte": column.__ge__,
        "$lt": column.__lt__,
        "$lte": column.__le__,
    }
    return comparisons[op](operand)
