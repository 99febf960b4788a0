"""Interfaces (application boundary) for SHELFMARK.

Defines framework-free application contracts: ABCs and small type aliases
shared by the service layer and adapters (document stores, ID generators).
Business rules stay out of this package.

Dependency rule: may refer to `shelfmark.domain` types for annotations only.
It may be imported by `shelfmark.service_layer`, `shelfmark.adapters`, and
`shelfmark.bootstrap`.
"""
