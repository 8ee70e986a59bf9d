"""Logging setup for the PURSE CLI.

Library modules only call ``logging.getLogger(__name__)`` and log at DEBUG;
nothing under ``purse`` attaches handlers except :func:`configure_logging`,
which the CLI calls once per invocation.

Console records go to stderr through Rich so stdout stays a clean pipe for
command results. A plain-text log file can be added with ``--log-file``; it
always receives DEBUG records regardless of ``-v``/``-q``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Mapping

PROJECT_PREFIX = "purse"

FILE_FORMAT = "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"


class SourceTagFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Tag each record with the short name of the code that emitted it.

    ``purse.paths`` becomes ``[paths]`` and ``purse.entrypoints.cli.rand``
    becomes ``[rand]``; loggers outside the project are tagged with their
    top-level package (``urllib3.connectionpool`` -> ``[urllib3]``). The tag
    is stored on ``record.tag`` and the record is always let through.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        parts = record.name.split(".")
        if parts[0] == PROJECT_PREFIX:
            record.tag = f"[{parts[-1]}]"
        else:
            record.tag = f"[{parts[0]}]"
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a Rich handler writing to stderr.

    Args:
        level: Minimum level shown; ignored in debug mode, which shows DEBUG.
        debug_mode: Show full logger names, timestamps and source locations
            instead of the short source tag.
        color: Use Rich's automatic colour detection; False disables colour.
    """
    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=Console(color_system="auto" if color else None, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(tag)s %(message)s"))
        handler.addFilter(SourceTagFilter())
    return handler


def config_log_file(path: Path) -> logging.FileHandler:
    """Return a DEBUG-level handler appending plain text to ``path``.

    The file is only opened when the first record arrives.
    """
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def configure_logging(
    level: int,
    *,
    debug_mode: bool = False,
    color: bool = True,
    log_file: Path | None = None,
    logger_levels: Mapping[str, int] | None = None,
) -> list[logging.Handler]:
    """Install the console handler (and optional log file) on the root logger.

    The root logger is opened to DEBUG so each handler applies its own
    threshold. Per-logger overrides from ``-L NAME=LEVEL`` are applied last
    and bind both destinations.

    Returns:
        The handlers that were installed.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if log_file is not None:
        handlers.append(config_log_file(log_file))

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def log_startup(
    logger: logging.Logger,
    *,
    app_version: str,
    level: int,
    log_file: Path | None,
    random_source: str,
    logger_levels: Mapping[str, int],
) -> None:
    """Log a one-line INFO summary followed by DEBUG details.

    Args:
        logger: Logger to write to.
        app_version: Version shown in the summary.
        level: Console level in effect.
        log_file: Log file path, or None when file logging is off.
        random_source: How `purse rand` picks its randomness (see
            :func:`purse.config.describe_rand_seed`).
        logger_levels: Per-logger overrides in effect.
    """
    logger.info(
        "PURSE %s - console=%s, log-file=%s, random=%s",
        app_version,
        logging.getLevelName(level),
        log_file or "OFF",
        random_source,
    )
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
