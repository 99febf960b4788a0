"""SHELFMARK test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behavior every DocumentStore implementation must share.
- integration/  : Real interactions with a SQLite database and Alembic.
- functional/   : The CLI exercised end-to-end at the boundary.
- fixtures/     : Shared fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); use AsyncMock or the
  in-memory store at the DocumentStore boundary.
- Contract tests parametrize store implementations over the same fixture data.
"""
