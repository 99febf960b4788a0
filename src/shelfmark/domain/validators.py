"""Field validators for domain records.

Each validator is a plain function taking the field name and its current
value and returning a `FieldValidationError` or ``None``. A record declares
an ordered tuple of ``(field, validators)`` rules; `run_validators` applies
them field by field, reporting at most one violation per field and never
stopping at the first offending field.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import date
from typing import Any, TypeAlias

from .errors import FieldValidationError

FieldValidator: TypeAlias = Callable[[str, Any], FieldValidationError | None]
FieldRules: TypeAlias = tuple[tuple[str, tuple[FieldValidator, ...]], ...]


def parse_date(value: date | str) -> date:
    """Return *value* as a calendar date.

    Args:
        value: A `date`/`datetime`, or an ISO-8601 ``YYYY-MM-DD`` string.

    Returns:
        The corresponding `date` (datetimes are returned unchanged).

    Raises:
        ValueError: If *value* does not denote a real calendar date.
        TypeError: If *value* is neither a date nor a string.
    """
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise TypeError(f"expected a date or ISO date string, got {type(value).__name__}")


def string(field: str, value: Any) -> FieldValidationError | None:
    """Reject present values that are not text."""
    if value is not None and not isinstance(value, str):
        return FieldValidationError(
            field, "type", f"{field} must be text (got {type(value).__name__})"
        )
    return None


def required(field: str, value: Any) -> FieldValidationError | None:
    """Reject missing values and empty strings."""
    if value is None or value == "":
        return FieldValidationError(field, "required", f"{field} is required")
    return None


def max_length(limit: int) -> FieldValidator:
    """Build a validator rejecting strings longer than *limit* characters."""

    def _max_length(field: str, value: Any) -> FieldValidationError | None:
        if isinstance(value, str) and len(value) > limit:
            return FieldValidationError(
                field,
                "max_length",
                f"{field} must be at most {limit} characters (got {len(value)})",
            )
        return None

    return _max_length


def calendar_date(field: str, value: Any) -> FieldValidationError | None:
    """Reject present values that are not real calendar dates."""
    if value is None:
        return None
    try:
        parse_date(value)
    except (TypeError, ValueError):
        return FieldValidationError(
            field, "date", f"{field} must be a valid calendar date (got {value!r})"
        )
    return None


def run_validators(
    rules: FieldRules, values: Mapping[str, Any]
) -> dict[str, FieldValidationError]:
    """Apply *rules* to *values* and collect one error per offending field.

    Args:
        rules: Ordered ``(field, validators)`` pairs.
        values: Current field values keyed by field name.

    Returns:
        Mapping of field name to its first violation; empty when all pass.
    """
    errors: dict[str, FieldValidationError] = {}
    for field, validators in rules:
        if (error := _first_error(field, values.get(field), validators)) is not None:
            errors[field] = error
    return errors


def _first_error(
    field: str, value: Any, validators: Iterable[FieldValidator]
) -> FieldValidationError | None:
    for validator in validators:
        if (error := validator(field, value)) is not None:
            return error
    return None
