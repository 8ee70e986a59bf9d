"""PURSE rand CLI — random alphanumeric strings.

The seed is taken from ``--seed`` or, failing that, ``PURSE_RAND_SEED``. With
a seed the output is reproducible; without one every string comes from a
fresh OS-seeded source.
"""

import logging

import click

from purse import config
from purse.randstr import RandomSource, SeededRandomSource, SystemRandomSource, rand_str

from .helpers import warn

logger = logging.getLogger(__name__)


def _resolve_source(seed: int | None) -> RandomSource:
    if seed is None:
        try:
            seed = config.get_rand_seed()
        except config.InvalidRandomSeedError as e:
            raise click.ClickException(str(e)) from e
    if seed is None:
        logger.debug("Using OS-seeded random source")
        return SystemRandomSource()
    logger.debug("Using seeded random source (seed=%s)", seed)
    return SeededRandomSource(seed)


@click.command()
@click.argument("length", type=click.IntRange(min=0))
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of strings to print, one per line.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help=f"Seed for reproducible output (overrides {config.RAND_SEED_ENV}).",
)
def rand(length: int, count: int, seed: int | None) -> None:
    """Print random strings of LENGTH letters and digits."""
    source = _resolve_source(seed)
    if isinstance(source, SeededRandomSource):
        warn(f"Using fixed seed {source.seed}; output is reproducible.")
    for _ in range(count):
        click.echo(rand_str(length, rng=source))
