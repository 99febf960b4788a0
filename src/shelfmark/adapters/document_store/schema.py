"""Author table schema for the SQLAlchemy document store.

Defines the ``authors`` table: one row per stored author record, keyed by its
26-character ULID. Name columns mirror the record's 100-character limit; the
two life dates are nullable calendar dates.

The shared `metadata` object applies a naming convention so constraints and
indexes get deterministic names, which keeps Alembic autogenerate stable.

Constraints (enforced here):

| Constraint                         | Purpose                       |
|------------------------------------|-------------------------------|
| PRIMARY KEY(author_id)             | store-assigned identity       |
| CHECK(length(first_name) 1..100)   | first name of 1-100 chars     |
| CHECK(length(family_name) 1..100)  | family name of 1-100 chars    |
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    Index,
    MetaData,
    String,
    Table,
)

from shelfmark.domain.author import NAME_MAX_LENGTH

__all__ = ["metadata", "authors"]

#: Global metadata with enforced naming convention.
#: All SHELFMARK tables must attach to this metadata object.
metadata = MetaData(
    naming_convention={
        "ix": "ix_%(table_name)s_%(column_0_N_name)s",
        "uq": "uq_%(table_name)s_%(column_0_N_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

authors = Table(
    "authors",
    metadata,
    Column(
        "author_id",
        String(26),
        primary_key=True,
        comment="Store-assigned author identifier (ULID).",
    ),
    Column(
        "first_name",
        String(NAME_MAX_LENGTH),
        nullable=False,
        comment="Given name.",
    ),
    Column(
        "family_name",
        String(NAME_MAX_LENGTH),
        nullable=False,
        comment="Family name.",
    ),
    Column("date_of_birth", Date, nullable=True, comment="Birth date, if known."),
    Column("date_of_death", Date, nullable=True, comment="Death date, if known."),
    CheckConstraint(
        f"length(first_name) BETWEEN 1 AND {NAME_MAX_LENGTH}",
        name="first_name_length",
    ),
    CheckConstraint(
        f"length(family_name) BETWEEN 1 AND {NAME_MAX_LENGTH}",
        name="family_name_length",
    ),
    Index(None, "family_name", "first_name"),
    comment="Author records of the catalogue. One row per person.",
)
