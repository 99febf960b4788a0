"""Domain-layer error definitions."""

from __future__ import annotations

from collections.abc import Mapping

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                        Author validation errors
# ============================================================================


class FieldValidationError(DomainError):
    """A single field-level rule violation.

    Instances are collected into a `ValidationResult` by
    `AuthorRecord.validate()`; they are data for the caller, not raised there.

    Attributes:
        field (str): Name of the offending field (e.g. ``"first_name"``).
        rule (str): Short rule identifier (``"type"``, ``"required"``,
            ``"max_length"``, ``"date"``).
        message (str): Human-readable description suitable for display.
    """

    def __init__(self, field: str, rule: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.rule = rule
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldValidationError):
            return NotImplemented
        return (self.field, self.rule, self.message) == (
            other.field,
            other.rule,
            other.message,
        )

    def __hash__(self) -> int:
        return hash((self.field, self.rule, self.message))

    def __repr__(self) -> str:
        return f"FieldValidationError(field={self.field!r}, rule={self.rule!r})"


class AuthorValidationError(DomainError):
    """Raised when an invalid author record is refused.

    Attributes:
        errors (Mapping[str, FieldValidationError]): Field name to violation.
    """

    def __init__(self, errors: Mapping[str, FieldValidationError]) -> None:
        super().__init__(
            "Invalid author record: "
            + "; ".join(str(error) for error in errors.values())
        )
        self.errors = dict(errors)
