"""CLI helpers for PURSE.

Utilities used by the command-line interface: logger-level option parsing
and message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, warn
from .options import input_option

__all__ = ["error", "input_option", "parse_log_level", "warn"]
