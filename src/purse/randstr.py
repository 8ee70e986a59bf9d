"""Random alphanumeric string generation.

Randomness comes from an explicitly passed ``RandomSource`` rather than a
process-wide generator. Pass a ``SeededRandomSource`` to get reproducible
output (tests, demos); leave ``rng`` unset to draw from a fresh OS-seeded
source on every call.

Note:
    None of these sources are suitable for secrets. Use :mod:`secrets` for
    tokens and passwords.
"""

import abc
import logging
import random
import string
import threading

# pylint: disable=too-few-public-methods

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits


class RandomSource(abc.ABC):
    """Contract for a source of random characters."""

    @abc.abstractmethod
    def pick(self, alphabet: str, k: int) -> str:
        """Return ``k`` characters drawn uniformly, with replacement, from ``alphabet``."""


class _LockedRandomSource(RandomSource):
    """A ``random.Random`` instance guarded by a lock.

    The lock makes a single instance safe to share between threads; draws
    from concurrent callers are serialized rather than interleaved.
    """

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self._lock = threading.Lock()

    def pick(self, alphabet: str, k: int) -> str:
        with self._lock:
            return "".join(self._rng.choices(alphabet, k=k))


class SystemRandomSource(_LockedRandomSource):
    """Pseudo-random source seeded from the operating system."""

    def __init__(self) -> None:
        super().__init__(random.Random())


class SeededRandomSource(_LockedRandomSource):
    """Deterministic source: equal seeds produce equal sequences."""

    def __init__(self, seed: int) -> None:
        super().__init__(random.Random(seed))
        self.seed = seed


def rand_str(length: int, rng: RandomSource | None = None) -> str:
    """Return a random string of ``length`` characters from ``ALPHABET``.

    Args:
        length: Number of characters to produce.
        rng: Source to draw from. Defaults to a new ``SystemRandomSource``
            per call, so unrelated callers never share generator state.

    Returns:
        str: ``length`` characters, each one of the 62 ASCII letters and digits.

    Raises:
        ValueError: If ``length`` is negative.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if rng is None:
        rng = SystemRandomSource()
    return rng.pick(ALPHABET, length)


__all__ = [
    "ALPHABET",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "rand_str",
]
