"""One-line notices for the PURSE CLI.

Notices go to stderr so a command's stdout stays usable in a pipeline. Each
kind has an emoji marker with an ASCII stand-in for terminals whose encoding
cannot represent it.
"""

from typing import Literal

import click

NoticeKind = Literal["warn", "error"]

# kind -> (emoji, ascii stand-in, colour)
_MARKERS: dict[str, tuple[str, str, str]] = {
    "warn": ("⚠️", "[!]", "yellow"),
    "error": ("❌", "[X]", "red"),
}


def _stderr_encodes(text: str) -> bool:
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    try:
        text.encode(getattr(stream, "encoding", None) or "ascii")
    except UnicodeEncodeError:
        return False
    return True


def marker(kind: NoticeKind) -> str:
    """Return the marker for ``kind`` that the current stderr can display.

    The stream is looked up on every call, so redirecting stderr mid-run is
    picked up.
    """
    emoji, fallback, _ = _MARKERS[kind]
    return emoji if _stderr_encodes(emoji) else fallback


def _notify(kind: NoticeKind, msg: str) -> None:
    colour = _MARKERS[kind][2]
    click.secho(f"{marker(kind)}  {msg}", fg=colour, bold=True, err=True)


def warn(msg: str) -> None:
    """Print a bold yellow notice, e.g. ``⚠️  Using fixed seed 42; ...``."""
    _notify("warn", msg)


def error(msg: str) -> None:
    """Print a bold red notice, e.g. ``❌  No span from 'BEGIN' to 'END' found.``"""
    _notify("error", msg)
