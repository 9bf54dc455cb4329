"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True, slots=True)
class DrawRecord:
    """Immutable record of a single draw.

    Attributes:
        index: Bucket chosen by the fair die roll.
        coin_toss: Fraction in [0, 1) from the biased coin toss.
        probability: Probability of the chosen bucket's primary item.
        used_alias: True if the alias item was returned.
        item: The item returned by the draw.
    """

    index: int
    coin_toss: Decimal
    probability: Decimal
    used_alias: bool
    item: Any
