"""Service layer for SHELFMARK.

Implements application use-cases: author registration, removal and counting.
Calls domain objects and the outbound ports defined in `shelfmark.interfaces`.

Dependency rule: may import `shelfmark.domain` and `shelfmark.interfaces`, but
not `shelfmark.adapters` or `shelfmark.entrypoints`.
"""
