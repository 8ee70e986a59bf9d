"""Miscellaneous single-string helpers."""

import logging
from collections.abc import Callable

from purse.errors import ChunkProcessingError

logger = logging.getLogger(__name__)

BACKTICK = "`"


def squeeze(s: str) -> str:
    """Remove every space character from ``s`` (other whitespace is kept)."""
    return s.replace(" ", "")


def wrap_str(s: str, prefix: str, suffix: str) -> str:
    """Return ``prefix + s + suffix``."""
    return prefix + s + suffix


def snip_str_at_index(s: str, x: int) -> str:
    """Truncate ``s`` to its first ``x`` characters.

    ``x`` is clamped to ``[0, len(s)]``; the result is never padded.

    Examples:
        >>> snip_str_at_index("hello", 2)
        'he'
        >>> snip_str_at_index("hello", 10)
        'hello'
    """
    return s[: max(0, min(x, len(s)))]


def back_tick() -> str:
    """Return a single backtick character."""
    return BACKTICK


def kebab_to_camel_case(text: str) -> str:
    """Convert ``kebab-case`` to ``camelCase``.

    Every part after the first is capitalised (first character upper-cased,
    the rest lower-cased). The first part is left exactly as given; empty
    parts from doubled dashes contribute nothing.

    Examples:
        >>> kebab_to_camel_case("foo-bar-baz")
        'fooBarBaz'
        >>> kebab_to_camel_case("FOO-bar")
        'FOOBar'
    """
    first, *rest = text.split("-")
    return first + "".join(part[:1].upper() + part[1:].lower() for part in rest)


def work_on_str_chunks(text: str, fn: Callable[[str], object]) -> None:
    """Call ``fn`` on each whitespace-separated token of ``text`` in order.

    Leading/trailing whitespace is ignored and runs of whitespace count as a
    single separator. Processing stops at the first token for which ``fn``
    raises.

    Args:
        text: The text to tokenize.
        fn: Callback invoked once per token. Its return value is ignored.

    Raises:
        ChunkProcessingError: If ``fn`` raises; the offending token is stored
            on the error and the original exception is chained as its cause.
    """
    for chunk in text.split():
        try:
            fn(chunk)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.debug("Chunk %r failed: %s", chunk, e)
            raise ChunkProcessingError(chunk, e) from e


__all__ = [
    "back_tick",
    "kebab_to_camel_case",
    "snip_str_at_index",
    "squeeze",
    "work_on_str_chunks",
    "wrap_str",
]
