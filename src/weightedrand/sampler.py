"""Weighted random sampling over a prebuilt alias table.

Each draw is two random numbers and one table lookup:
    fair die roll (bucket) -> biased coin toss -> primary or alias.

The sampler holds no mutable state of its own; the random source is owned
and managed by the caller.
"""

from __future__ import annotations

import decimal
import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from weightedrand.config import WeightedRandConfig
from weightedrand.logging.logger import DrawLogger
from weightedrand.logging.types import DrawRecord
from weightedrand.random.registry import RandomSourceRegistry
from weightedrand.table import DEFAULT_PRECISION, AliasTable, build_alias_table

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from weightedrand.random.base import RandomSource
    from weightedrand.weights import WeightedItem

logger = logging.getLogger("weightedrand")

T = TypeVar("T")

DEFAULT_COIN_RESOLUTION = 100


class WeightedRandom(ABC, Generic[T]):
    """Source of items drawn according to their weights."""

    @abstractmethod
    def next(self) -> T:
        """Draw one item."""

    def sample(self, k: int) -> list[T]:
        """Draw *k* independent items.

        Args:
            k: Number of draws, must be non-negative.

        Returns:
            List of *k* drawn items.
        """
        if k < 0:
            raise ValueError(f"sample size must be non-negative, got {k}")
        return [self.next() for _ in range(k)]

    def __iter__(self) -> Iterator[T]:
        while True:
            yield self.next()


class VoseAliasSampler(WeightedRandom[T]):
    """O(1) weighted sampler over an alias table.

    Args:
        table: Alias table built by :func:`build_alias_table`.
        random: Caller-owned random source.
        coin_resolution: Granularity ``M`` of the coin toss; the fraction
            is ``k / M`` for ``k`` drawn uniformly from ``[0, M)``.
        draw_logger: Optional per-draw diagnostic logger.
    """

    def __init__(
        self,
        table: AliasTable[T],
        random: RandomSource,
        *,
        coin_resolution: int = DEFAULT_COIN_RESOLUTION,
        draw_logger: DrawLogger | None = None,
    ) -> None:
        if coin_resolution < 2:
            raise ValueError(f"coin_resolution must be at least 2, got {coin_resolution}")
        self._table = table
        self._random = random
        self._resolution = coin_resolution
        self._resolution_decimal = Decimal(coin_resolution)
        # Private context so draws do not depend on the caller's decimal settings.
        self._context = decimal.Context(prec=max(28, len(str(coin_resolution)) + 2))
        self._draw_logger = draw_logger if draw_logger is not None and draw_logger.enabled else None

    @property
    def table(self) -> AliasTable[T]:
        return self._table

    @property
    def random(self) -> RandomSource:
        return self._random

    @property
    def coin_resolution(self) -> int:
        return self._resolution

    @property
    def draw_logger(self) -> DrawLogger | None:
        """Active diagnostic logger, or ``None`` when logging is disabled."""
        return self._draw_logger

    def next(self) -> T:
        """Draw one item in constant time.

        Returns:
            The primary item of a uniformly chosen bucket if the coin toss
            falls below its probability, otherwise the bucket's alias.
        """
        # Fair die roll picks a bucket.
        index = self._random.uniform_int(len(self._table))
        bucket = self._table[index]
        # Biased coin toss decides between primary and alias.
        coin_toss = self._context.divide(
            Decimal(self._random.uniform_int64(self._resolution)),
            self._resolution_decimal,
        )
        used_alias = not coin_toss < bucket.probability
        item = bucket.aliased_item if used_alias else bucket.primary_item

        if self._draw_logger is not None:
            self._draw_logger.log_draw(
                DrawRecord(
                    index=index,
                    coin_toss=coin_toss,
                    probability=bucket.probability,
                    used_alias=used_alias,
                    item=item,
                )
            )
        return item  # type: ignore[return-value]

    def __str__(self) -> str:
        return f"{{random: {type(self._random).__name__}, tuples: {self._table}}}"

    def __repr__(self) -> str:
        return (
            f"VoseAliasSampler(n={len(self._table)}, random={self._random.name!r}, "
            f"coin_resolution={self._resolution})"
        )


def new_alias_vose_method(
    random: RandomSource,
    *items: WeightedItem[T] | tuple[T, Any],
    precision: int = DEFAULT_PRECISION,
    coin_resolution: int = DEFAULT_COIN_RESOLUTION,
) -> VoseAliasSampler[T]:
    """Build a sampler over *items* using Vose's alias method.

    Example::

        wr = new_alias_vose_method(NumpyRandomSource(seed=1337), ("A", 2), ("B", 3))
        wr.next()

    Args:
        random: Caller-owned random source.
        *items: Weighted items or ``(item, weight)`` pairs.
        precision: Significant digits for weight normalization.
        coin_resolution: Granularity of the coin toss.

    Returns:
        A sampler with an immutable table.

    Raises:
        EmptyItemsError: If no items are provided.
        NegativeWeightError: If any weight is negative.
        UnsupportedWeightTypeError: If a weight has an unsupported type.
    """
    table = build_alias_table(items, precision=precision)
    return VoseAliasSampler(table, random, coin_resolution=coin_resolution)


def from_config(
    items: Iterable[WeightedItem[T] | tuple[T, Any]],
    config: WeightedRandConfig | None = None,
    random: RandomSource | None = None,
) -> VoseAliasSampler[T]:
    """Build a sampler with settings taken from configuration.

    Args:
        items: Weighted items or ``(item, weight)`` pairs.
        config: Settings; loaded from the environment when ``None``.
        random: Random source; built from ``config.random_source_type``
            and ``config.random_seed`` when ``None``.

    Returns:
        A sampler wired with the configured draw logger.
    """
    if config is None:
        config = WeightedRandConfig()
    table = build_alias_table(items, precision=config.decimal_precision)
    if random is None:
        random = RandomSourceRegistry.build(config)

    sampler = VoseAliasSampler(
        table,
        random,
        coin_resolution=config.coin_resolution,
        draw_logger=DrawLogger(config),
    )
    logger.info(
        "VoseAliasSampler initialized: items=%d, random_source=%s, coin_resolution=%d",
        len(table),
        random.name,
        config.coin_resolution,
    )
    return sampler
