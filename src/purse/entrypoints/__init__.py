"""Entrypoints (inbound adapters) for PURSE.

Expose the helpers to the outside world. Parse and validate inputs, call the
library functions, and present results.
"""
