"""create authors table

Revision ID: 3f2b9c1d7a40
Revises:
Create Date: 2026-09-14 19:12:41.508113

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f2b9c1d7a40"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "authors",
        sa.Column(
            "author_id",
            sa.String(length=26),
            nullable=False,
            comment="Store-assigned author identifier (ULID).",
        ),
        sa.Column(
            "first_name",
            sa.String(length=100),
            nullable=False,
            comment="Given name.",
        ),
        sa.Column(
            "family_name",
            sa.String(length=100),
            nullable=False,
            comment="Family name.",
        ),
        sa.Column(
            "date_of_birth", sa.Date(), nullable=True, comment="Birth date, if known."
        ),
        sa.Column(
            "date_of_death", sa.Date(), nullable=True, comment="Death date, if known."
        ),
        sa.CheckConstraint(
            "length(first_name) BETWEEN 1 AND 100",
            name=op.f("ck_authors_first_name_length"),
        ),
        sa.CheckConstraint(
            "length(family_name) BETWEEN 1 AND 100",
            name=op.f("ck_authors_family_name_length"),
        ),
        sa.PrimaryKeyConstraint("author_id", name=op.f("pk_authors")),
        comment="Author records of the catalogue. One row per person.",
    )
    op.create_index(
        op.f("ix_authors_family_name_first_name"),
        "authors",
        ["family_name", "first_name"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(op.f("ix_authors_family_name_first_name"), table_name="authors")
    op.drop_table("authors")
