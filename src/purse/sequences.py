"""Helpers over ordered sequences of strings (and, where noted, any items)."""

from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def slice_contains(seq: Iterable[str], item: str) -> bool:
    """Return True if ``item`` is equal to any element of ``seq``."""
    return any(s == item for s in seq)


def remove_duplicates_in_slice(seq: Iterable[H]) -> list[H]:
    """Drop repeated items, keeping the first occurrence of each in order.

    Example:
        >>> remove_duplicates_in_slice(["b", "a", "b", "c", "a"])
        ['b', 'a', 'c']
    """
    return list(dict.fromkeys(seq))


def reverse_slice(seq: Sequence[T]) -> list[T]:
    """Return a new list with the items of ``seq`` in reverse order."""
    return list(reversed(seq))


def prefix_slice_items(items: Iterable[str], prefix: str) -> str:
    """Prefix every item with ``prefix`` and concatenate them with no separator.

    Example:
        >>> prefix_slice_items(["a", "b"], "-")
        '-a-b'
    """
    return "".join(prefix + item for item in items)


def must_equal_one_of(s: str, *options: str) -> bool:
    """Return True if ``s`` exactly equals at least one of ``options``."""
    return s in options


__all__ = [
    "must_equal_one_of",
    "prefix_slice_items",
    "remove_duplicates_in_slice",
    "reverse_slice",
    "slice_contains",
]
