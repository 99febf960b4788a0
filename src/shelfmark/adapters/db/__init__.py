"""Database wiring for the SQLAlchemy document store: engines, metadata, types, migrations."""
