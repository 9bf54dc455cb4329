"""Shared pytest fixtures for weightedrand tests.

Provides seeded random sources, a scripted source, and the marble item
sets used across multiple test modules.
"""

from __future__ import annotations

import pytest

from weightedrand.config import WeightedRandConfig
from weightedrand.random.scripted import ScriptedRandomSource
from weightedrand.random.seeded import NumpyRandomSource, StdlibRandomSource
from weightedrand.weights import WeightedItem

RED = "RED"
ORANGE = "ORANGE"
YELLOW = "YELLOW"
GREEN = "GREEN"
BLUE = "BLUE"


@pytest.fixture
def default_config() -> WeightedRandConfig:
    """Return a WeightedRandConfig with field defaults only (no .env)."""
    return WeightedRandConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def numpy_source() -> NumpyRandomSource:
    """Return a NumpyRandomSource with a fixed seed."""
    return NumpyRandomSource(seed=1337)


@pytest.fixture
def stdlib_source() -> StdlibRandomSource:
    """Return a StdlibRandomSource with a fixed seed."""
    return StdlibRandomSource(seed=1337)


@pytest.fixture
def zero_source() -> ScriptedRandomSource:
    """Return a source that always draws 0."""
    return ScriptedRandomSource([0])


@pytest.fixture
def one_to_three() -> list[WeightedItem[str]]:
    """Blue with weight 1 and red with weight 3."""
    return [WeightedItem(BLUE, 1), WeightedItem(RED, 3)]


@pytest.fixture
def marbles() -> list[WeightedItem[str]]:
    """Four marbles weighted 1:50:100:1000."""
    return [
        WeightedItem(RED, 1),
        WeightedItem(ORANGE, 50),
        WeightedItem(YELLOW, 100),
        WeightedItem(GREEN, 1000),
    ]
