"""Seedable pseudo-random sources for reproducible draw sequences.

Both sources hold a private generator, so two instances built with the same
seed replay identical sequences. Neither is safe for unsynchronized use
from several threads; give each thread its own instance.
"""

from __future__ import annotations

import random

import numpy as np

from weightedrand.exceptions import RandomSourceError
from weightedrand.random.base import MAX_INT64, RandomSource, check_bound
from weightedrand.random.registry import register_random_source


@register_random_source("numpy")
class NumpyRandomSource(RandomSource):
    """Source backed by ``numpy.random.default_rng`` (PCG64).

    Args:
        seed: Optional seed for reproducible output. ``None`` draws fresh
            entropy from the OS.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def name(self) -> str:
        """Return ``'numpy'``."""
        return "numpy"

    def uniform_int(self, n: int) -> int:
        """Return a uniform integer in ``[0, n)``.

        Args:
            n: Exclusive upper bound in ``[1, 2**63 - 1]``.

        Returns:
            An integer ``0 <= k < n``.

        Raises:
            RandomSourceError: If *n* is out of range.
        """
        n = check_bound(n)
        if n > MAX_INT64:
            raise RandomSourceError(f"bound {n} exceeds the int64 range")
        return int(self._rng.integers(0, n))


@register_random_source("stdlib")
class StdlibRandomSource(RandomSource):
    """Source backed by a private ``random.Random`` (Mersenne Twister).

    Args:
        seed: Optional seed for reproducible output.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        """Return ``'stdlib'``."""
        return "stdlib"

    def uniform_int(self, n: int) -> int:
        n = check_bound(n)
        return self._rng.randrange(n)
