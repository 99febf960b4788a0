"""Parsing and in-memory evaluation of author field filters.

Both bundled stores accept the same filter language. `parse_filter` turns a
`FieldFilter` into a flat list of `Condition` objects (one per field and
operator), rejecting anything the stores cannot honour. The in-memory store
evaluates conditions with `matches`; the SQLAlchemy store translates them to
SQL expressions.

Semantics shared by every backend
- A plain value matches exactly; ``None`` matches an unset field.
- ``$exists``: True matches set fields, False matches unset ones.
- ``$ne``: matches unset fields too.
- ``$gt``/``$gte``/``$lt``/``$lte``/``$in``: never match unset fields.
- Date operands may be `date` objects or ISO strings; name and id operands
  must be text.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from shelfmark.domain.author import AUTHOR_FIELDS
from shelfmark.domain.validators import parse_date
from shelfmark.interfaces.document_store import (
    FILTER_OPERATORS,
    FieldFilter,
    UnsupportedFilterError,
)

FILTERABLE_FIELDS = (*AUTHOR_FIELDS, "author_id")
DATE_FIELDS = frozenset({"date_of_birth", "date_of_death"})
TEXT_FIELDS = frozenset({"first_name", "family_name", "author_id"})

_ORDERING: dict[str, Callable[[Any, Any], bool]] = {
    "$gt": operator.gt,
    "$gte": operator.ge,
    "$lt": operator.lt,
    "$lte": operator.le,
}


@dataclass(frozen=True, slots=True)
class Condition:
    """A single ``field <op> operand`` test."""

    field: str
    op: str
    operand: Any


def parse_filter(filters: FieldFilter | None) -> list[Condition]:
    """Validate *filters* and flatten them into conditions.

    Args:
        filters: Field filter, or ``None`` for no filtering.

    Returns:
        list[Condition]: Conditions to AND together; empty matches everything.

    Raises:
        UnsupportedFilterError: On unknown fields, unknown operators, or
            operands of the wrong shape.
    """
    conditions: list[Condition] = []
    for field, clause in (filters or {}).items():
        if field not in FILTERABLE_FIELDS:
            raise UnsupportedFilterError(field, "unknown field")
        if _is_operator_clause(clause):
            for op, operand in clause.items():
                conditions.append(Condition(field, op, _coerce(field, op, operand)))
        else:
            conditions.append(Condition(field, "$eq", _coerce(field, "$eq", clause)))
    return conditions


def matches(document: Mapping[str, Any], conditions: list[Condition]) -> bool:
    """Return True if *document* satisfies every condition."""
    return all(_test(document.get(c.field), c) for c in conditions)


def _is_operator_clause(clause: Any) -> bool:
    return (
        isinstance(clause, Mapping)
        and bool(clause)
        and all(isinstance(key, str) and key.startswith("$") for key in clause)
    )


def _coerce(field: str, op: str, operand: Any) -> Any:
    if op not in FILTER_OPERATORS:
        raise UnsupportedFilterError(field, f"unknown operator {op!r}")
    if op == "$exists":
        if not isinstance(operand, bool):
            raise UnsupportedFilterError(field, "$exists expects true or false")
        return operand
    if op == "$in":
        if isinstance(operand, (str, bytes, Mapping)) or not hasattr(
            operand, "__iter__"
        ):
            raise UnsupportedFilterError(field, "$in expects a list of values")
        return tuple(_coerce_value(field, value) for value in operand)
    if isinstance(operand, Mapping):
        raise UnsupportedFilterError(field, f"{op} expects a plain value")
    if operand is None and op in _ORDERING:
        raise UnsupportedFilterError(field, f"{op} cannot compare with null")
    return _coerce_value(field, operand)


def _coerce_value(field: str, value: Any) -> Any:
    if value is None:
        return value
    if field in TEXT_FIELDS:
        if not isinstance(value, str):
            raise UnsupportedFilterError(field, f"{value!r} is not text")
        return value
    try:
        parsed = parse_date(value)
    except (TypeError, ValueError) as e:
        raise UnsupportedFilterError(field, f"{value!r} is not a calendar date") from e
    return parsed.date() if isinstance(parsed, datetime) else parsed


def _test(value: Any, condition: Condition) -> bool:  # pylint: disable=too-many-return-statements
    op, operand = condition.op, condition.operand
    if isinstance(value, datetime):
        value = value.date()
    if op == "$exists":
        return (value is not None) is operand
    if op == "$eq":
        return value == operand
    if op == "$ne":
        return value != operand
    if value is None:
        return False
    if op == "$in":
        return value in operand
    return _ORDERING[op](value, operand)
