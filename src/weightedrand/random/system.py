"""System random source using ``os.urandom()``.

This is the default source. It is cryptographically secure and always
available, but cannot be seeded, so draw sequences are not reproducible.
"""

from __future__ import annotations

import os

from weightedrand.random.base import RandomSource, check_bound
from weightedrand.random.registry import register_random_source


@register_random_source("system")
class SystemRandomSource(RandomSource):
    """``os.urandom()`` wrapper with rejection sampling.

    Each draw reads just enough bytes to cover ``n - 1`` and rejects
    values outside ``[0, n)``, so the result carries no modulo bias.
    """

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    def uniform_int(self, n: int) -> int:
        """Return a uniform integer in ``[0, n)`` from the OS CSPRNG.

        Args:
            n: Exclusive upper bound, must be positive.

        Returns:
            An integer ``0 <= k < n``.
        """
        n = check_bound(n)
        if n == 1:
            return 0
        bits = (n - 1).bit_length()
        nbytes = (bits + 7) // 8
        mask = (1 << bits) - 1
        while True:
            value = int.from_bytes(os.urandom(nbytes), "big") & mask
            if value < n:
                return value
