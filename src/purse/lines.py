"""Line-oriented text helpers.

Text is split on ``"\\n"`` only; ``"\\r"`` is treated as ordinary content.
Splitting and rejoining with the same delimiter always reproduces the input:

    >>> join_lines(make_lines("a\\n\\nb\\n"))
    'a\\n\\nb\\n'

None of these helpers mutate their arguments.
"""

from collections.abc import Sequence

NEWLINE = "\n"


def make_lines(text: str) -> list[str]:
    """Split ``text`` into lines.

    An empty string yields a single empty line, and a trailing newline yields
    a trailing empty line.
    """
    return text.split(NEWLINE)


def join_lines(lines: Sequence[str]) -> str:
    """Join ``lines`` with newlines (inverse of ``make_lines``)."""
    return NEWLINE.join(lines)


def get_first_line(text: str) -> str:
    """Return the first line of ``text``."""
    lines = make_lines(text)
    if not lines:
        return text
    return lines[0]


def get_last_line(text: str) -> str:
    """Return the last line of ``text``."""
    lines = make_lines(text)
    if not lines:
        return text
    return lines[-1]


def replace_first_line(text: str, new_line: str) -> str:
    """Replace the first line of ``text`` with ``new_line``."""
    lines = make_lines(text)
    if lines:
        lines[0] = new_line
    return join_lines(lines)


def replace_last_line(text: str, new_line: str) -> str:
    """Replace the last line of ``text`` with ``new_line``."""
    lines = make_lines(text)
    if lines:
        lines[-1] = new_line
    return join_lines(lines)


def remove_first_line(text: str) -> str:
    """Drop everything up to and including the first newline.

    Unlike the other line helpers this does not fall back to the input: text
    without a newline is a single line, and removing it leaves ``""``.

    Examples:
        >>> remove_first_line("a\\nb\\nc")
        'b\\nc'
        >>> remove_first_line("noNewline")
        ''
    """
    index = text.find(NEWLINE)
    if index == -1:
        return ""
    return text[index + 1 :]


def remove_trailing_empty_lines(text: str) -> str:
    """Remove blank lines from the end of ``text``.

    A line is blank when it is empty after stripping whitespace. Blank lines
    between non-blank ones are kept.
    """
    lines = make_lines(text)
    while lines and not lines[-1].strip():
        lines.pop()
    return join_lines(lines)


def remove_empty_lines(text: str) -> str:
    """Remove every blank line from ``text``."""
    return join_lines([line for line in make_lines(text) if line.strip()])


def prefix_lines(text: str, prefix: str) -> str:
    """Prepend ``prefix`` to every line of ``text``."""
    return join_lines([prefix + line for line in make_lines(text)])


def flatten_lines(lines: Sequence[str]) -> list[str]:
    """Return a new list with leading spaces and tabs stripped from each line.

    Other leading whitespace (e.g. ``"\\r"`` or form feeds) is kept.
    """
    return [line.lstrip(" \t") for line in lines]


def flatten(text: str) -> str:
    """Strip leading spaces/tabs from every line and concatenate the lines.

    Newlines are dropped: the lines are joined with no separator.

    Example:
        >>> flatten("a\\n  b\\n\\tc")
        'abc'
    """
    return "".join(flatten_lines(make_lines(text)))


def trim_leading_spaces(text: str) -> str:
    """Strip leading space characters (not tabs) from every line of ``text``."""
    return join_lines([line.lstrip(" ") for line in make_lines(text)])


def count_leading_spaces(line: str) -> int:
    """Count consecutive space characters at the start of ``line``.

    Tabs and other whitespace end the run.
    """
    return len(line) - len(line.lstrip(" "))


def match_leading_spaces(str1: str, str2: str) -> str:
    """Indent ``str1`` with as many spaces as ``str2`` starts with.

    ``str1`` is not stripped first, so its own indentation is kept after the
    added padding.
    """
    return " " * count_leading_spaces(str2) + str1


__all__ = [
    "count_leading_spaces",
    "flatten",
    "flatten_lines",
    "get_first_line",
    "get_last_line",
    "join_lines",
    "make_lines",
    "match_leading_spaces",
    "prefix_lines",
    "remove_empty_lines",
    "remove_first_line",
    "remove_trailing_empty_lines",
    "replace_first_line",
    "replace_last_line",
    "trim_leading_spaces",
]
