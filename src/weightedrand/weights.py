"""Weighted items and exact-decimal weight coercion.

Weights are accepted as Python ``int`` (every signed/unsigned width), any
bounded ``numpy.integer`` scalar, or ``decimal.Decimal``. All of them are
normalized into ``Decimal`` so that sums, ratios and comparisons against 1
carry no binary floating-point representation error.

An omitted weight and an explicit weight of zero are indistinguishable:
both default to 1. A caller therefore cannot express "never select this
item" with a zero weight.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Generic, TypeVar, Union

import numpy as np

from weightedrand.exceptions import (
    InvalidWeightError,
    NegativeWeightError,
    UnsupportedWeightTypeError,
)

T = TypeVar("T")

Weight = Union[int, np.integer, Decimal]
"""Types accepted as raw weights."""

ONE = Decimal(1)
ZERO = Decimal(0)


@dataclass(frozen=True, slots=True)
class WeightedItem(Generic[T]):
    """An item paired with its raw weight.

    Attributes:
        item: Caller-supplied value returned by draws.
        weight: Raw weight; ``None`` (or zero) means a weight of 1.
    """

    item: T
    weight: Weight | None = None

    @classmethod
    def of(cls, value: Any) -> WeightedItem[Any]:
        """Convert a ``WeightedItem`` or an ``(item, weight)`` pair.

        Args:
            value: A ``WeightedItem`` or a 2-tuple.

        Returns:
            The value as a ``WeightedItem``.

        Raises:
            TypeError: If *value* is neither.
        """
        if isinstance(value, WeightedItem):
            return value
        if isinstance(value, tuple) and len(value) == 2:
            return cls(item=value[0], weight=value[1])
        raise TypeError(
            f"expected WeightedItem or (item, weight) pair, got {type(value).__name__}"
        )

    def __str__(self) -> str:
        weight = 0 if self.weight is None else self.weight
        return f"{{weight: {weight}, item: {self.item}}}"


def weight_as_decimal(value: Weight | None) -> Decimal:
    """Coerce a raw weight into an exact ``Decimal``.

    No defaulting or sign check happens here; ``None`` becomes zero.

    Args:
        value: Raw weight.

    Returns:
        The weight as a ``Decimal``.

    Raises:
        UnsupportedWeightTypeError: If the type is not ``int``,
            ``numpy.integer`` or ``Decimal``.
        InvalidWeightError: If a ``Decimal`` weight is NaN or infinite.
    """
    if value is None:
        return ZERO
    # bool is an int subclass but not a weight.
    if isinstance(value, (bool, np.bool_)):
        raise UnsupportedWeightTypeError(
            f"unsupported numerical value {value!r} ({type(value).__name__})"
        )
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidWeightError(f"weight must be a finite value, but was {value}")
        return value
    if isinstance(value, (int, np.integer)):
        return Decimal(int(value))
    raise UnsupportedWeightTypeError(
        f"unsupported numerical value {value!r} ({type(value).__name__})"
    )


def effective_weight(value: Weight | None) -> Decimal:
    """Return the weight used for normalization.

    Zero or omitted weights become 1; negative weights are rejected.

    Args:
        value: Raw weight.

    Returns:
        A strictly positive ``Decimal``.

    Raises:
        NegativeWeightError: If the weight is negative.
        UnsupportedWeightTypeError: See :func:`weight_as_decimal`.
        InvalidWeightError: See :func:`weight_as_decimal`.
    """
    weight = weight_as_decimal(value)
    if weight == ZERO:
        return ONE
    if weight < ZERO:
        raise NegativeWeightError(f"weight must be non-negative value, but was {weight}")
    return weight
