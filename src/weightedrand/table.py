"""Alias table construction (Vose's Alias Method).

The builder normalizes weights so their mean is exactly 1, partitions
items into ``small`` (< 1) and ``large`` (>= 1) worklists, and pairs them
into buckets of capacity 1. Each bucket keeps its primary item with
probability ``p`` and hands the remaining ``1 - p`` to its alias.

All arithmetic runs on ``decimal.Decimal`` inside a local context whose
precision is configurable.
"""

from __future__ import annotations

import decimal
import logging
from collections import deque
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from weightedrand.exceptions import AliasTableInvariantError, EmptyItemsError, InvalidWeightError
from weightedrand.weights import ONE, ZERO, WeightedItem, effective_weight

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

logger = logging.getLogger("weightedrand")

T = TypeVar("T")

DEFAULT_PRECISION = 28


@dataclass(frozen=True, slots=True)
class AliasTuple(Generic[T]):
    """One bucket of the alias table.

    Attributes:
        probability: Chance in [0, 1] that the bucket yields ``primary_item``.
        primary_item: Item kept by the bucket.
        aliased_item: Item returned otherwise. Meaningless when
            ``has_alias`` is False.
        has_alias: Whether ``aliased_item`` is set. Tracked separately so
            that ``None`` stays a valid item.
    """

    probability: Decimal
    primary_item: T
    aliased_item: T | None = None
    has_alias: bool = False

    @classmethod
    def pure(cls, item: T) -> AliasTuple[T]:
        """Bucket that always yields *item*."""
        return cls(probability=ONE, primary_item=item)

    @classmethod
    def paired(cls, probability: Decimal, primary: T, alias: T) -> AliasTuple[T]:
        """Bucket split between *primary* and *alias*."""
        return cls(probability=probability, primary_item=primary, aliased_item=alias, has_alias=True)

    @property
    def is_pure(self) -> bool:
        return self.probability == ONE

    def __str__(self) -> str:
        alias = f"{self.aliased_item}" if self.has_alias else "[nil]"
        return f"{{probability: {self.probability}, primary: {self.primary_item}, alias: {alias}}}"


class AliasTable(Generic[T]):
    """Immutable, ordered sequence of alias tuples.

    Invariants are checked once on construction; afterwards the table is
    read-only and safe to share between threads.

    Args:
        tuples: Buckets of the table, one per input item.

    Raises:
        AliasTableInvariantError: If the table is empty, a probability is
            outside [0, 1], or a non-pure bucket has no alias.
    """

    __slots__ = ("_tuples",)

    def __init__(self, tuples: Iterable[AliasTuple[T]]) -> None:
        self._tuples: tuple[AliasTuple[T], ...] = tuple(tuples)
        self._validate()

    def _validate(self) -> None:
        if not self._tuples:
            raise AliasTableInvariantError("alias table must contain at least one tuple")
        for index, bucket in enumerate(self._tuples):
            if bucket.probability < ZERO or bucket.probability > ONE:
                raise AliasTableInvariantError(
                    f"tuple {index} has probability {bucket.probability} outside [0, 1]"
                )
            if bucket.probability < ONE and not bucket.has_alias:
                raise AliasTableInvariantError(
                    f"tuple {index} has probability {bucket.probability} but no alias"
                )

    def __len__(self) -> int:
        return len(self._tuples)

    def __getitem__(self, index: int) -> AliasTuple[T]:
        return self._tuples[index]

    def __iter__(self) -> Iterator[AliasTuple[T]]:
        return iter(self._tuples)

    @property
    def pure_count(self) -> int:
        """Number of buckets with probability exactly 1."""
        return sum(1 for bucket in self._tuples if bucket.is_pure)

    def probabilities(self) -> list[tuple[T, Decimal]]:
        """Per-item selection probability implied by the table.

        Each bucket is chosen with probability ``1/n``; its mass is split
        between primary and alias. Hashable items are matched by equality,
        unhashable ones by identity. Items are returned in first-seen order.

        Returns:
            List of ``(item, probability)`` pairs summing to 1.
        """
        n = Decimal(len(self._tuples))
        totals: dict[tuple[str, Any], list[Any]] = {}

        def _add(item: Any, mass: Decimal) -> None:
            key = _item_key(item)
            if key in totals:
                totals[key][1] += mass
            else:
                totals[key] = [item, mass]

        for bucket in self._tuples:
            _add(bucket.primary_item, bucket.probability)
            if bucket.has_alias:
                _add(bucket.aliased_item, ONE - bucket.probability)
        return [(item, mass / n) for item, mass in totals.values()]

    def __str__(self) -> str:
        return "[" + ", ".join(str(bucket) for bucket in self._tuples) + "]"

    def __repr__(self) -> str:
        return f"AliasTable(n={len(self._tuples)}, pure={self.pure_count})"


def _item_key(item: Any) -> tuple[str, Any]:
    try:
        hash(item)
    except TypeError:
        return ("id", id(item))
    return ("value", item)


@dataclass(slots=True)
class _NormalizedItem(Generic[T]):
    item: T
    weight: Decimal


def _partition(
    items: Sequence[WeightedItem[T]],
) -> tuple[deque[_NormalizedItem[T]], deque[_NormalizedItem[T]]]:
    """Normalize weights and split them into small and large worklists.

    Must be called inside a decimal context with the desired precision.

    Args:
        items: Non-empty sequence of weighted items.

    Returns:
        ``(small, large)`` deques, each ordered by ascending weight.
    """
    buffer = [_NormalizedItem(item.item, effective_weight(item.weight)) for item in items]
    total = sum((entry.weight for entry in buffer), ZERO)

    count = Decimal(len(buffer))
    for entry in buffer:
        entry.weight = entry.weight / total * count

    # sorted() is stable, so ties keep input order.
    buffer = sorted(buffer, key=lambda entry: entry.weight)
    split = next(
        (index for index, entry in enumerate(buffer) if entry.weight >= ONE),
        len(buffer),
    )
    return deque(buffer[:split]), deque(buffer[split:])


def build_alias_table(
    items: Iterable[WeightedItem[T] | tuple[T, Any]],
    *,
    precision: int = DEFAULT_PRECISION,
) -> AliasTable[T]:
    """Build an alias table from weighted items.

    Zero or omitted weights count as 1. The resulting table has exactly
    one tuple per input item.

    Args:
        items: Weighted items or ``(item, weight)`` pairs, in input order.
        precision: Significant digits used for decimal arithmetic.

    Returns:
        The immutable alias table.

    Raises:
        EmptyItemsError: If *items* is empty.
        NegativeWeightError: If any weight is negative.
        InvalidWeightError: If a decimal weight is not finite, or the
            weights sum past the largest representable decimal.
        UnsupportedWeightTypeError: If a weight has an unsupported type.
    """
    weighted = [WeightedItem.of(value) for value in items]
    if not weighted:
        raise EmptyItemsError("at least one item must be provided")

    with decimal.localcontext() as ctx:
        ctx.prec = precision
        try:
            small, large = _partition(weighted)
        except (decimal.Overflow, decimal.InvalidOperation) as exc:
            raise InvalidWeightError(
                f"total weight exceeds the decimal range at precision {precision}"
            ) from exc

        tuples: list[AliasTuple[T]] = []
        while small and large:
            lesser = small.popleft()
            greater = large.popleft()
            tuples.append(AliasTuple.paired(lesser.weight, lesser.item, greater.item))

            # What the large item has left after filling the small bucket.
            residual = _NormalizedItem(greater.item, greater.weight + lesser.weight - ONE)
            if residual.weight < ONE:
                small.append(residual)
            else:
                large.append(residual)

        # Leftovers absorb rounding slack and become pure buckets.
        for remaining in large:
            tuples.append(AliasTuple.pure(remaining.item))
        for remaining in small:
            tuples.append(AliasTuple.pure(remaining.item))

    table = AliasTable(tuples)
    logger.debug(
        "Built alias table: items=%d pure=%d precision=%d",
        len(table),
        table.pure_count,
        precision,
    )
    return table
