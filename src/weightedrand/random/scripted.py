"""Scripted random source for deterministic tests.

Replays a fixed sequence of integers, reducing each modulo the requested
bound, and wraps around when the sequence is exhausted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weightedrand.exceptions import RandomSourceError
from weightedrand.random.base import RandomSource, check_bound
from weightedrand.random.registry import register_random_source

if TYPE_CHECKING:
    from collections.abc import Iterable


@register_random_source("scripted")
class ScriptedRandomSource(RandomSource):
    """Replays *values* in order, cycling forever.

    Usage:
        ``ScriptedRandomSource([2, 99])`` makes every draw pick bucket
        ``2 % n`` and toss ``99 % m``.

    Args:
        values: Non-negative integers to replay. Defaults to ``(0,)``.

    Raises:
        RandomSourceError: If *values* is empty or holds a negative value.
    """

    def __init__(self, values: Iterable[int] = (0,)) -> None:
        self._values = tuple(int(value) for value in values)
        if not self._values:
            raise RandomSourceError("scripted source needs at least one value")
        if any(value < 0 for value in self._values):
            raise RandomSourceError("scripted values must be non-negative")
        self._position = 0

    @property
    def name(self) -> str:
        """Return ``'scripted'``."""
        return "scripted"

    @property
    def calls(self) -> int:
        """Number of draws served so far."""
        return self._position

    def uniform_int(self, n: int) -> int:
        n = check_bound(n)
        value = self._values[self._position % len(self._values)]
        self._position += 1
        return value % n
