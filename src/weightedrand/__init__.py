"""weightedrand: O(1) weighted random sampling with Vose's alias method.

Builds an immutable alias table from weighted items in O(n), normalizing
weights with exact decimal arithmetic, then draws items in constant time
from any caller-supplied random source.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("weightedrand")
except PackageNotFoundError:
    __version__ = "0.0.0"

from weightedrand.config import WeightedRandConfig, resolve_config, validate_overrides
from weightedrand.exceptions import (
    AliasTableInvariantError,
    ConfigValidationError,
    EmptyItemsError,
    InvalidWeightError,
    NegativeWeightError,
    RandomSourceError,
    TableConstructionError,
    UnsupportedWeightTypeError,
    WeightedRandError,
)
from weightedrand.random import RandomSource, RandomSourceRegistry
from weightedrand.sampler import (
    VoseAliasSampler,
    WeightedRandom,
    from_config,
    new_alias_vose_method,
)
from weightedrand.table import AliasTable, AliasTuple, build_alias_table
from weightedrand.weights import Weight, WeightedItem

__all__ = [
    "AliasTable",
    "AliasTableInvariantError",
    "AliasTuple",
    "ConfigValidationError",
    "EmptyItemsError",
    "InvalidWeightError",
    "NegativeWeightError",
    "RandomSource",
    "RandomSourceError",
    "RandomSourceRegistry",
    "TableConstructionError",
    "UnsupportedWeightTypeError",
    "VoseAliasSampler",
    "Weight",
    "WeightedItem",
    "WeightedRandConfig",
    "WeightedRandError",
    "WeightedRandom",
    "__version__",
    "build_alias_table",
    "from_config",
    "new_alias_vose_method",
    "resolve_config",
    "validate_overrides",
]
