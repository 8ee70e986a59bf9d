"""The ``purse`` command.

A Click-Extra group whose options only shape logging; each subcommand is a
thin wrapper over one library helper:

- ``purse lines ...``: pick, drop, prefix, flatten and re-indent lines.
- ``purse replace / remove / scan / search / split``: substring helpers.
- ``purse dedupe / camel``: sequence and word helpers.
- ``purse rand``: random alphanumeric strings.
- ``purse path-check``: filesystem path probe.

Text is read from ``--input`` (stdin by default) and results go to stdout.
Logs and notices go to stderr, plus ``--log-file`` when given. Nothing is
written to disk otherwise.

Examples
    $ printf 'a\\nb\\n' | purse lines first
    $ purse -v rand 16 --count 3
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from purse import __version__, config
from purse.logging import configure_logging, log_startup

from .helpers import parse_log_level
from .lines import lines as lines_group
from .paths import path_check
from .rand import rand
from .text import camel, dedupe, remove, replace, scan, search, split

logger = logging.getLogger(__name__)


HELP = """PURSE command-line interface.

    Small, predictable text helpers for shell pipelines: pick or drop lines,
    replace and extract substrings, de-duplicate, generate random strings and
    probe paths.
    """


def _console_level(verbose_count: int, quiet_count: int) -> int:
    """Map ``-v``/``-q`` counts onto a level, starting from WARNING."""
    level = logging.WARNING + 10 * (quiet_count - verbose_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Show more log output on stderr; repeat for more (-v INFO, -vv DEBUG).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Show less log output on stderr; repeat for less (-q ERROR, -qq CRITICAL).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything with logger names and source locations.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="PURSE_LOG_FILE",
    show_envvar=True,
    help="Also append DEBUG-level logs to this file (unaffected by -v/-q).",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="PURSE_LOGGER_LEVELS",
    show_envvar=True,
    help=(
        "Set the minimum LEVEL of one logger (NAME=LEVEL), for the console and "
        "the log file alike. Repeatable (e.g. -L purse.paths=DEBUG) or via "
        "PURSE_LOGGER_LEVELS as a comma/space list."
    ),
)
@clickx.pass_context
def purse(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_file: Path | None,
    logger_levels: dict[str, int],
) -> None:
    """PURSE command-line interface."""
    level = _console_level(verbose_count, quiet_count)
    configure_logging(
        level,
        debug_mode=debug,
        color=ctx.color is not False,
        log_file=log_file,
        logger_levels=logger_levels,
    )
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        log_file=log_file,
        random_source=config.describe_rand_seed(),
        logger_levels=logger_levels,
    )
    ctx.call_on_close(logging.shutdown)


for _command in (
    lines_group,
    replace,
    remove,
    scan,
    search,
    split,
    dedupe,
    camel,
    rand,
    path_check,
):
    purse.add_command(_command)
