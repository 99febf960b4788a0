"""SHELFMARK

The author-record core of an online library catalogue. It validates
person records, derives their display values, and counts stored authors
through a pluggable document store.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
