"""Random source subsystem for weightedrand.

Re-exports the ABC, registry, and all built-in source implementations
for convenient access::

    from weightedrand.random import RandomSource, RandomSourceRegistry
    from weightedrand.random import NumpyRandomSource, SystemRandomSource
"""

from weightedrand.random.base import RandomSource
from weightedrand.random.registry import RandomSourceRegistry, register_random_source
from weightedrand.random.scripted import ScriptedRandomSource
from weightedrand.random.seeded import NumpyRandomSource, StdlibRandomSource
from weightedrand.random.system import SystemRandomSource

__all__ = [
    "NumpyRandomSource",
    "RandomSource",
    "RandomSourceRegistry",
    "ScriptedRandomSource",
    "StdlibRandomSource",
    "SystemRandomSource",
    "register_random_source",
]
