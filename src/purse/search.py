"""Substring search and replacement helpers.

All searches are plain, case-sensitive substring matches (no regular
expressions). Helpers that replace a single occurrence leave the input
unchanged when there is nothing to replace.
"""


def _splice(s: str, index: int, old: str, new: str) -> str:
    return s[:index] + new + s[index + len(old) :]


def replace_first_instance_of(s: str, old: str, new: str) -> str:
    """Replace the first occurrence of ``old`` in ``s`` with ``new``."""
    index = s.find(old)
    if index == -1:
        return s
    return _splice(s, index, old, new)


def replace_last_instance_of(s: str, old: str, new: str) -> str:
    """Replace the last occurrence of ``old`` in ``s`` with ``new``."""
    index = s.rfind(old)
    if index == -1:
        return s
    return _splice(s, index, old, new)


def replace_last_sub_str(s: str, old: str, new: str) -> str:
    """Replace the last occurrence of ``old`` in ``s`` with ``new``.

    Examples:
        >>> replace_last_sub_str("a.b.c", ".", "-")
        'a.b-c'
        >>> replace_last_sub_str("abc", "x", "y")
        'abc'
    """
    return replace_last_instance_of(s, old, new)


def remove_all_sub_str(s: str, *subs: str) -> str:
    """Remove every occurrence of each of ``subs`` from ``s``.

    Substrings are removed one after another in the order given, so a later
    removal sees the output of the earlier ones:

        >>> remove_all_sub_str("aabb", "ab", "ab")
        ''
    """
    for sub in subs:
        s = s.replace(sub, "")
    return s


def target_search(text: str, primary: str, secondary: str) -> tuple[str, bool]:
    """Find the span running from ``primary`` through the next ``secondary``.

    The search for ``secondary`` starts where ``primary`` starts, so the two
    may overlap.

    Args:
        text: The text to search.
        primary: Marks the start of the span.
        secondary: Marks the end of the span.

    Returns:
        tuple[str, bool]: ``(span, True)`` on success, ``("", False)`` when
        either marker is absent.
    """
    start = text.find(primary)
    if start == -1:
        return "", False
    end = text.find(secondary, start)
    if end == -1:
        return "", False
    return text[start : end + len(secondary)], True


def scan_between_sub_strs(s: str, start: str, end: str) -> list[str]:
    """Collect every ``start ... end`` span of ``s``, delimiters included.

    Scanning is left to right and not nest-aware: once a ``start`` is seen,
    further ``start`` markers are captured literally until the next ``end``.
    A capture still open at the end of input is dropped.

    One delimiter may be empty. An empty ``start`` opens a capture at the
    current position, so ``end`` closes everything scanned so far. An empty
    ``end`` closes each capture right after its ``start``, as long as input
    remains after it.

    Examples:
        >>> scan_between_sub_strs("<a><b>", "<", ">")
        ['<a>', '<b>']
        >>> scan_between_sub_strs("<a><b", "<", ">")
        ['<a>']
        >>> scan_between_sub_strs("abc", "", "c")
        ['abc']
        >>> scan_between_sub_strs("<a<", "<", "")
        ['<']

    Raises:
        ValueError: If both ``start`` and ``end`` are empty.
    """
    if not start and not end:
        raise ValueError("start and end delimiters cannot both be empty")

    out: list[str] = []
    pos = 0
    while (begin := s.find(start, pos)) != -1:
        close = s.find(end, begin + len(start))
        # an empty end only matches while input is left to scan
        if close == -1 or (not end and close >= len(s)):
            break
        pos = close + len(end)
        out.append(s[begin:pos])
    return out


def split_with_target_inclusion(s: str, target: str) -> list[str]:
    """Split ``s`` on ``target``, keeping each ``target`` as its own item.

    Examples:
        >>> split_with_target_inclusion("a,b,c", ",")
        ['a', ',', 'b', ',', 'c']
        >>> split_with_target_inclusion("abc", ",")
        ['abc']

    Raises:
        ValueError: If ``target`` is empty.
    """
    if not target:
        raise ValueError("target must be non-empty")

    parts: list[str] = []
    for segment in s.split(target):
        parts.extend([segment, target])
    # the loop adds one target too many
    parts.pop()
    return parts


__all__ = [
    "remove_all_sub_str",
    "replace_first_instance_of",
    "replace_last_instance_of",
    "replace_last_sub_str",
    "scan_between_sub_strs",
    "split_with_target_inclusion",
    "target_search",
]
