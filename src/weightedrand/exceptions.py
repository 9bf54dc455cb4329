"""Exception hierarchy for weightedrand.

All exceptions derive from WeightedRandError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class WeightedRandError(Exception):
    """Base exception for all weightedrand errors."""


class TableConstructionError(WeightedRandError):
    """An alias table could not be built from the supplied items.

    No partial table is exposed when this is raised.
    """


class EmptyItemsError(TableConstructionError):
    """No weighted items were supplied."""


class InvalidWeightError(TableConstructionError):
    """A weight has a supported type but an unusable value (NaN, infinity)."""


class NegativeWeightError(InvalidWeightError):
    """A weight coerced to a negative decimal value."""


class UnsupportedWeightTypeError(TableConstructionError):
    """A weight's type cannot be coerced into an exact decimal.

    Supported types are ``int``, ``numpy.integer`` scalars and
    ``decimal.Decimal``. Binary floating point is rejected.
    """


class AliasTableInvariantError(WeightedRandError):
    """An alias table violates its structural invariants.

    Raised when a tuple's probability lies outside [0, 1] or when a tuple
    with probability below 1 carries no alias. This signals a programming
    error, never a recoverable runtime condition.
    """


class RandomSourceError(WeightedRandError):
    """A random source was asked for an invalid draw."""


class ConfigValidationError(WeightedRandError):
    """Configuration field validation failed.

    Raised when overrides contain unknown keys or fail type validation.
    """
