"""Command-line interface for SHELFMARK."""
