"""Adapters (infrastructure) for SHELFMARK.

Provide concrete implementations of the application ports (document stores,
ID generators), plus persistence mapping and related wiring (engines,
metadata, migrations).

Dependency rule: may import `shelfmark.domain`; the domain must not import this
package.
"""
