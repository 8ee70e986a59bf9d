"""PURSE path-check CLI — filesystem path probe.

Prints ``PATH<TAB>ok`` when the path can be looked up (whether or not
anything exists there) and ``PATH<TAB>error`` when the lookup itself fails,
e.g. on permission denied. Exits with code 1 if any path errors.
"""

import click

from purse.paths import str_is_file_path

from .helpers import error


@click.command("path-check")
@click.argument("paths", nargs=-1, required=True)
@click.pass_context
def path_check(ctx: click.Context, paths: tuple[str, ...]) -> None:
    """Check that each of PATHS can be looked up on the filesystem."""
    failed = 0
    for path in paths:
        ok = str_is_file_path(path)
        click.echo(f"{path}\t{'ok' if ok else 'error'}")
        failed += not ok
    if failed:
        error(f"{failed} path(s) could not be probed.")
        ctx.exit(1)
