"""PURSE text CLI — substring and sequence commands.

Commands read the text from ``--input`` (stdin by default). Commands that
produce a list print one item per line; commands that transform the text
echo it back without adding a newline.

Failure modes
- Empty delimiters for ``scan``/``split`` → ``BadParameter`` (exit code 2).
- ``search`` with no match → error message on stderr, exit code 1.
- ``camel`` stops at the first word that cannot be written and reports it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from purse import lines as lines_ops
from purse.errors import ChunkProcessingError
from purse.search import (
    remove_all_sub_str,
    replace_first_instance_of,
    replace_last_instance_of,
    scan_between_sub_strs,
    split_with_target_inclusion,
    target_search,
)
from purse.sequences import remove_duplicates_in_slice
from purse.strings import kebab_to_camel_case, work_on_str_chunks

from .helpers import error, input_option

if TYPE_CHECKING:
    from typing import TextIO

logger = logging.getLogger(__name__)


@click.command()
@click.argument("old")
@click.argument("new")
@click.option(
    "--which",
    type=click.Choice(["first", "last"], case_sensitive=False),
    default="last",
    show_default=True,
    help="Which single occurrence of OLD to replace.",
)
@input_option
def replace(old: str, new: str, which: str, source: TextIO) -> None:
    """Replace one occurrence of OLD with NEW."""
    text = source.read()
    if which.lower() == "first":
        click.echo(replace_first_instance_of(text, old, new), nl=False)
    else:
        click.echo(replace_last_instance_of(text, old, new), nl=False)


@click.command()
@click.argument("subs", nargs=-1, required=True)
@input_option
def remove(subs: tuple[str, ...], source: TextIO) -> None:
    """Remove every occurrence of each of SUBS, in the order given."""
    click.echo(remove_all_sub_str(source.read(), *subs), nl=False)


@click.command()
@click.argument("start")
@click.argument("end")
@input_option
def scan(start: str, end: str, source: TextIO) -> None:
    """Print every START...END span (delimiters included), one per line."""
    try:
        spans = scan_between_sub_strs(source.read(), start, end)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    logger.debug("scan found %d span(s)", len(spans))
    for span in spans:
        click.echo(span)


@click.command()
@click.argument("primary")
@click.argument("secondary")
@input_option
@click.pass_context
def search(ctx: click.Context, primary: str, secondary: str, source: TextIO) -> None:
    """Print the span from PRIMARY through the next SECONDARY."""
    span, found = target_search(source.read(), primary, secondary)
    if not found:
        error(f"No span from {primary!r} to {secondary!r} found.")
        ctx.exit(1)
    click.echo(span)


@click.command()
@click.argument("target")
@input_option
def split(target: str, source: TextIO) -> None:
    """Split on TARGET, printing each piece and each TARGET on its own line."""
    try:
        parts = split_with_target_inclusion(source.read(), target)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    for part in parts:
        click.echo(part)


@click.command()
@input_option
def dedupe(source: TextIO) -> None:
    """Remove duplicate lines, keeping the first occurrence of each."""
    unique = remove_duplicates_in_slice(lines_ops.make_lines(source.read()))
    click.echo(lines_ops.join_lines(unique), nl=False)


@click.command()
@click.argument("words", nargs=-1)
@input_option
def camel(words: tuple[str, ...], source: TextIO) -> None:
    """Convert kebab-case WORDS (or whitespace-separated input) to camelCase."""
    text = " ".join(words) if words else source.read()

    def _emit(word: str) -> None:
        click.echo(kebab_to_camel_case(word))

    try:
        work_on_str_chunks(text, _emit)
    except ChunkProcessingError as e:
        raise click.ClickException(str(e)) from e
