"""Abstract base class for all random sources.

The sampler consumes exactly two operations: a uniform integer in
``[0, n)`` to pick a bucket, and a uniform integer in ``[0, m)`` from which
the coin-toss fraction is derived. The ABC provides a default
``uniform_int64()`` that delegates to ``uniform_int()`` and a concrete
``health_check()``. Subclasses must implement ``name`` and
``uniform_int()``.

The sampler never closes or otherwise manages the lifecycle of a source.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from weightedrand.exceptions import RandomSourceError

MAX_INT64 = 2**63 - 1


class RandomSource(ABC):
    """Abstract base for all random sources.

    Implementations are not required to be thread-safe. Callers sharing a
    source across threads must synchronize access themselves or give each
    thread its own instance.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'system'``, ``'numpy'``)."""

    @abstractmethod
    def uniform_int(self, n: int) -> int:
        """Return a uniformly distributed integer in ``[0, n)``.

        Args:
            n: Exclusive upper bound, must be positive.

        Returns:
            An integer ``0 <= k < n``.

        Raises:
            RandomSourceError: If *n* is not positive.
        """

    def uniform_int64(self, m: int) -> int:
        """Return a uniformly distributed integer in ``[0, m)``, ``m < 2**63``.

        The default implementation checks the bound and delegates to
        :meth:`uniform_int`.

        Args:
            m: Exclusive upper bound in ``[1, 2**63 - 1]``.

        Returns:
            An integer ``0 <= k < m``.

        Raises:
            RandomSourceError: If *m* is out of range.
        """
        if m > MAX_INT64:
            raise RandomSourceError(f"bound {m} exceeds the int64 range")
        return self.uniform_int(m)

    def close(self) -> None:
        """Release resources. No-op unless overridden."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": True}


def check_bound(n: int) -> int:
    """Validate an exclusive upper bound.

    Args:
        n: Candidate bound.

    Returns:
        *n* as a plain ``int``.

    Raises:
        RandomSourceError: If *n* is not a positive integer.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise RandomSourceError(f"bound must be an int, got {type(n).__name__}")
    if n <= 0:
        raise RandomSourceError(f"bound must be positive, got {n}")
    return n
