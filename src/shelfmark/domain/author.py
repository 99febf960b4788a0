"""Author record: the person entity of the catalogue.

An `AuthorRecord` holds a first name, a family name, and optional birth and
death dates. It is mutable until it is handed to a document store, validated
on demand (never implicitly), and exposes two derived values, `name` and
`lifespan`, recomputed on every access.

Rules
- `first_name` and `family_name` are required text of at most 100 characters.
- `date_of_birth` and `date_of_death` are optional but, when present, must be
  real calendar dates (a `date` or an ISO ``YYYY-MM-DD`` string).
- Birth need not precede death.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from types import MappingProxyType
from typing import Any

from .errors import AuthorValidationError, FieldValidationError
from .validators import (
    FieldRules,
    calendar_date,
    max_length,
    parse_date,
    required,
    run_validators,
    string,
)

NAME_MAX_LENGTH = 100

AUTHOR_FIELDS = ("first_name", "family_name", "date_of_birth", "date_of_death")

AUTHOR_RULES: FieldRules = (
    ("first_name", (string, required, max_length(NAME_MAX_LENGTH))),
    ("family_name", (string, required, max_length(NAME_MAX_LENGTH))),
    ("date_of_birth", (calendar_date,)),
    ("date_of_death", (calendar_date,)),
)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of `AuthorRecord.validate()`.

    Either valid (no errors) or a mapping of field name to the violation
    found for that field. Every offending field is present.
    """

    errors: Mapping[str, FieldValidationError] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def is_valid(self) -> bool:
        """True when no field violates a rule."""
        return not self.errors

    def raise_for_errors(self) -> None:
        """Raise `AuthorValidationError` if any field is invalid."""
        if self.errors:
            raise AuthorValidationError(self.errors)


@dataclass(slots=True)
class AuthorRecord:
    """A person record in the catalogue.

    Construct with any subset of fields; unset fields are ``None``.

    Attributes:
        first_name: Given name.
        family_name: Family name.
        date_of_birth: Birth date as a `date` or ISO string, if known.
        date_of_death: Death date as a `date` or ISO string, if known.
        author_id: Store-assigned identifier; ``None`` until stored.
    """

    first_name: str | None = None
    family_name: str | None = None
    date_of_birth: date | str | None = None
    date_of_death: date | str | None = None
    author_id: str | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> AuthorRecord:
        """Build a record from a mapping, ignoring keys that are not fields."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})

    @property
    def name(self) -> str:
        """``"family, first"`` when both names are set, otherwise ``""``."""
        return full_name(self)

    @property
    def lifespan(self) -> str:
        """``"birthYear - deathYear"`` with empty tokens for unknown dates."""
        return lifespan(self)

    def validate(self) -> ValidationResult:
        """Check every field rule and report all offending fields.

        Pure: the record is not modified and no store is touched.
        """
        values = {name: getattr(self, name) for name in AUTHOR_FIELDS}
        return ValidationResult(MappingProxyType(run_validators(AUTHOR_RULES, values)))

    def to_document(self) -> dict[str, Any]:
        """Render the record as a plain mapping for a document store.

        Date fields are normalized to `date` objects.

        Raises:
            AuthorValidationError: If the record is invalid.
        """
        self.validate().raise_for_errors()
        return {
            "first_name": self.first_name,
            "family_name": self.family_name,
            "date_of_birth": _as_date(self.date_of_birth),
            "date_of_death": _as_date(self.date_of_death),
        }


def full_name(author: AuthorRecord) -> str:
    """Return ``"{family_name}, {first_name}"`` or ``""`` if either is empty."""
    if not author.first_name or not author.family_name:
        return ""
    return f"{author.family_name}, {author.first_name}"


def lifespan(author: AuthorRecord) -> str:
    """Return ``"{birthYear} - {deathYear}"``; unknown years render empty."""
    return f"{_year_token(author.date_of_birth)} - {_year_token(author.date_of_death)}"


def _year_token(value: date | str | None) -> str:
    if value is None:
        return ""
    try:
        return f"{parse_date(value).year:04d}"
    except (TypeError, ValueError):
        return ""


def _as_date(value: date | str | None) -> date | None:
    if value is None:
        return None
    parsed = parse_date(value)
    return parsed.date() if isinstance(parsed, datetime) else parsed
