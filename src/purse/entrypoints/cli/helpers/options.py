"""Shared Click options for text-taking commands."""

import logging
from typing import TextIO

import click

logger = logging.getLogger(__name__)


def _log_source(_ctx: click.Context, _param: click.Parameter, value: TextIO) -> TextIO:
    logger.debug("Reading text from %s", getattr(value, "name", "<stream>"))
    return value


input_option = click.option(
    "--input",
    "-i",
    "source",
    type=click.File("r", encoding="utf-8"),
    default="-",
    show_default=True,
    callback=_log_source,
    help="File to read the text from ('-' for stdin).",
)
