"""Configuration utilities for PURSE.

This module centralizes the environment variables PURSE reads and the small
getters that parse them.
"""

import os

from purse.errors import PurseError

RAND_SEED_ENV = "PURSE_RAND_SEED"  # pragma: no mutate


class InvalidRandomSeedError(PurseError):
    """Raised when PURSE_RAND_SEED is set but is not an integer."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"{RAND_SEED_ENV} must be an integer, got {value!r}")


def get_rand_seed() -> int | None:
    """Get the random seed from the environment.

    Returns:
        The integer value of `PURSE_RAND_SEED`, or None when it is unset or empty.

    Raises:
        InvalidRandomSeedError: If `PURSE_RAND_SEED` is not an integer.
    """
    if not (raw := os.environ.get(RAND_SEED_ENV, "").strip()):
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidRandomSeedError(raw) from e


def describe_rand_seed() -> str:
    """Describe the random source `PURSE_RAND_SEED` selects, for diagnostics.

    Never raises: a malformed value is reported rather than rejected, since
    only ``purse rand`` needs a valid seed.
    """
    try:
        seed = get_rand_seed()
    except InvalidRandomSeedError as e:
        return f"invalid {RAND_SEED_ENV} {e.value!r}"
    return "system" if seed is None else f"seed {seed}"
