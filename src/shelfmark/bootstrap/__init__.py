"""Bootstrap (composition root) for SHELFMARK.

Assembles the application at runtime: wires the concrete document store and
id generator, reads configuration, and hands entrypoints a ready container.

Import rules:
- Entry points import *this* package (not adapters directly).
- This package may import: `shelfmark.adapters`, `shelfmark.service_layer`,
  `shelfmark.interfaces`, `shelfmark.domain`, and `shelfmark.config`.
- Inner layers must not import `shelfmark.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_store

__all__ = ["AppContainer", "bootstrap", "build_store"]
