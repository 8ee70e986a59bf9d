"""PURSE lines CLI — line-oriented transformations.

Every command reads the whole text from ``--input`` (stdin by default) and
applies exactly one helper from :mod:`purse.lines`. Commands that return a
whole text echo it back byte-for-byte (no newline is added), so they compose
in pipelines; ``first`` and ``last`` print a single line.

Note that a text ending in a newline has an empty last line:
``printf 'a\\nb\\n' | purse lines last`` prints an empty line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import click_extra as clickx

from purse import lines as lines_ops

from .helpers import input_option

if TYPE_CHECKING:
    from typing import TextIO


@click.group(cls=clickx.ExtraGroup)
def lines() -> None:
    """Line-oriented text transformations."""


@lines.command()
@input_option
def first(source: TextIO) -> None:
    """Print the first line."""
    click.echo(lines_ops.get_first_line(source.read()))


@lines.command()
@input_option
def last(source: TextIO) -> None:
    """Print the last line."""
    click.echo(lines_ops.get_last_line(source.read()))


@lines.command("remove-first")
@input_option
def remove_first(source: TextIO) -> None:
    """Drop the first line (prints nothing for single-line input)."""
    click.echo(lines_ops.remove_first_line(source.read()), nl=False)


@lines.command("remove-trailing-empty")
@input_option
def remove_trailing_empty(source: TextIO) -> None:
    """Drop blank lines at the end of the text."""
    click.echo(lines_ops.remove_trailing_empty_lines(source.read()), nl=False)


@lines.command("remove-empty")
@input_option
def remove_empty(source: TextIO) -> None:
    """Drop every blank line."""
    click.echo(lines_ops.remove_empty_lines(source.read()), nl=False)


@lines.command()
@input_option
def flatten(source: TextIO) -> None:
    """Strip leading spaces/tabs and join all lines into one."""
    click.echo(lines_ops.flatten(source.read()))


@lines.command()
@input_option
def trim(source: TextIO) -> None:
    """Strip leading spaces (not tabs) from every line."""
    click.echo(lines_ops.trim_leading_spaces(source.read()), nl=False)


@lines.command()
@click.argument("prefix")
@input_option
def prefix(prefix: str, source: TextIO) -> None:  # pylint: disable=redefined-outer-name
    """Prepend PREFIX to every line."""
    click.echo(lines_ops.prefix_lines(source.read(), prefix), nl=False)


@lines.command()
@click.argument("line")
@click.option(
    "--last",
    "replace_last",
    is_flag=True,
    help="Replace the last line instead of the first.",
)
@input_option
def swap(line: str, replace_last: bool, source: TextIO) -> None:
    """Replace the first (or last) line with LINE."""
    text = source.read()
    if replace_last:
        click.echo(lines_ops.replace_last_line(text, line), nl=False)
    else:
        click.echo(lines_ops.replace_first_line(text, line), nl=False)


@lines.command()
@click.argument("reference")
@input_option
def indent(reference: str, source: TextIO) -> None:
    """Indent each line with as many spaces as REFERENCE starts with."""
    indented = [
        lines_ops.match_leading_spaces(line, reference)
        for line in lines_ops.make_lines(source.read())
    ]
    click.echo(lines_ops.join_lines(indented), nl=False)
