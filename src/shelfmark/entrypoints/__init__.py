"""Entrypoints (inbound adapters) for SHELFMARK.

Expose the application to the outside world: currently the CLI. Parse and
validate inputs, call service-layer operations, and present results.

Dependency rule: may import `shelfmark.service_layer` and `shelfmark.bootstrap`.
The CLI reaches into `shelfmark.adapters.db` only for engines and dialect
errors.
"""
