"""Diagnostic logging subsystem for weightedrand.

Provides immutable per-draw records and a configurable logger that
supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from weightedrand.logging.logger import DrawLogger
from weightedrand.logging.types import DrawRecord

__all__ = [
    "DrawLogger",
    "DrawRecord",
]
