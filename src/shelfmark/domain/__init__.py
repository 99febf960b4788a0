"""Domain layer for SHELFMARK.

Contains business rules: the author record, its field validators, and the
errors they report. This package is deliberately technology-agnostic.

Dependency rule: do not import from `shelfmark.adapters` or `shelfmark.entrypoints`.
"""
