"""Unit tests for purse.lines."""

import pytest

from purse import lines

# pylint: disable=magic-value-comparison


class TestMakeAndJoinLines:
    """Tests for make_lines / join_lines."""

    @staticmethod
    def test_empty_text_is_one_empty_line() -> None:
        """An empty string splits into a single empty line."""
        assert lines.make_lines("") == [""]

    @staticmethod
    def test_trailing_newline_gives_trailing_empty_line() -> None:
        """A trailing newline is kept as an empty last line."""
        assert lines.make_lines("a\nb\n") == ["a", "b", ""]

    @staticmethod
    def test_carriage_return_is_content() -> None:
        """Only LF separates lines; CR stays in the line."""
        assert lines.make_lines("a\r\nb") == ["a\r", "b"]

    @staticmethod
    def test_join_accepts_tuples() -> None:
        """join_lines accepts any sequence of strings."""
        assert lines.join_lines(("a", "", "b")) == "a\n\nb"


@pytest.mark.parametrize(
    ("text", "first", "last"),
    [
        ("a\nb\nc", "a", "c"),
        ("single", "single", "single"),
        ("", "", ""),
        ("a\n", "a", ""),
    ],
)
def test_get_first_and_last_line(text, first, last):
    """get_first_line/get_last_line pick the ends of the split sequence."""
    assert lines.get_first_line(text) == first
    assert lines.get_last_line(text) == last


@pytest.mark.parametrize(
    ("text", "expected_first", "expected_last"),
    [
        ("a\nb\nc", "X\nb\nc", "a\nb\nX"),
        ("only", "X", "X"),
        ("", "X", "X"),
        ("a\n", "X\n", "a\nX"),
    ],
)
def test_replace_first_and_last_line(text, expected_first, expected_last):
    """replace_first_line/replace_last_line swap exactly one line."""
    assert lines.replace_first_line(text, "X") == expected_first
    assert lines.replace_last_line(text, "X") == expected_last


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a\nb\nc", "b\nc"),
        ("noNewline", ""),
        ("", ""),
        ("\n", ""),
        ("a\n", ""),
        ("\nb", "b"),
    ],
)
def test_remove_first_line(text, expected):
    """remove_first_line drops through the first newline, or everything if none."""
    assert lines.remove_first_line(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a\nb\n\n  \n\t\n", "a\nb"),
        ("a\n\nb\n\n", "a\n\nb"),
        ("a\nb", "a\nb"),
        ("\n\n", ""),
        ("", ""),
        ("  x  \n ", "  x  "),
    ],
)
def test_remove_trailing_empty_lines(text, expected):
    """Only trailing blank lines are removed; interior ones survive."""
    assert lines.remove_trailing_empty_lines(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a\n\nb\n  \nc\n", "a\nb\nc"),
        ("\n\t\n", ""),
        (" a \n", " a "),
    ],
)
def test_remove_empty_lines(text, expected):
    """Every blank line is removed; non-blank lines are kept verbatim."""
    assert lines.remove_empty_lines(text) == expected


def test_prefix_lines():
    """Every line, including empty ones, gets the prefix."""
    assert lines.prefix_lines("a\n\nb", "> ") == "> a\n> \n> b"
    assert lines.prefix_lines("", "# ") == "# "


class TestFlatten:
    """Tests for flatten_lines / flatten."""

    @staticmethod
    def test_flatten_lines_strips_spaces_and_tabs_only() -> None:
        """Leading spaces and tabs go; other whitespace and trailing spaces stay."""
        assert lines.flatten_lines(["  a", "\t\tb ", " \t c", "\fd"]) == [
            "a",
            "b ",
            "c",
            "\fd",
        ]

    @staticmethod
    def test_flatten_lines_does_not_mutate_input() -> None:
        """The argument list is left untouched."""
        original = ["  a", "\tb"]
        result = lines.flatten_lines(original)
        assert original == ["  a", "\tb"]
        assert result is not original

    @staticmethod
    def test_flatten_joins_without_separator() -> None:
        """flatten drops the newlines entirely."""
        assert lines.flatten("a\n  b\n\tc") == "abc"

    @staticmethod
    def test_flatten_keeps_trailing_spaces() -> None:
        """Only leading indentation is removed."""
        assert lines.flatten("  if x: \n    y") == "if x: y"


def test_trim_leading_spaces_keeps_tabs():
    """Leading spaces are removed per line, tabs are not."""
    assert lines.trim_leading_spaces("  a\n\tb\n \t c") == "a\n\tb\n\t c"


@pytest.mark.parametrize(
    ("line", "expected"),
    [("    x", 4), ("x", 0), ("", 0), ("   ", 3), (" \t x", 1), ("\t  x", 0)],
)
def test_count_leading_spaces(line, expected):
    """Only the initial run of space characters is counted."""
    assert lines.count_leading_spaces(line) == expected


@pytest.mark.parametrize(
    ("str1", "str2", "expected"),
    [
        ("x", "    y", "    x"),
        ("x", "y", "x"),
        ("  x", "   y", "     x"),
        ("x", "\t y", "x"),
    ],
)
def test_match_leading_spaces(str1, str2, expected):
    """str1 gets str2's leading-space count prepended without being stripped."""
    assert lines.match_leading_spaces(str1, str2) == expected
