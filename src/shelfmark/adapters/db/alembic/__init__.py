"""Alembic migration scripts for the SHELFMARK database."""
