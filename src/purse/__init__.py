"""PURSE

A small toolkit of string- and sequence-manipulation helpers: line splitting
and joining, substring search and replacement, trimming, deduplication,
random string generation and a filesystem path probe.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
