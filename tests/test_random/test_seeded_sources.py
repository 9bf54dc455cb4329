"""Tests for NumpyRandomSource and StdlibRandomSource."""

from __future__ import annotations

import pytest

from weightedrand.exceptions import RandomSourceError
from weightedrand.random.seeded import NumpyRandomSource, StdlibRandomSource

_SOURCES = [NumpyRandomSource, StdlibRandomSource]


@pytest.mark.parametrize("source_cls", _SOURCES)
class TestSeededSources:
    """Behaviour shared by both seedable sources."""

    def test_seeded_reproducibility(self, source_cls: type) -> None:
        a = source_cls(seed=123)
        b = source_cls(seed=123)
        assert [a.uniform_int(1000) for _ in range(50)] == [b.uniform_int(1000) for _ in range(50)]

    def test_different_seeds_differ(self, source_cls: type) -> None:
        a = source_cls(seed=1)
        b = source_cls(seed=2)
        assert [a.uniform_int(10**9) for _ in range(10)] != [b.uniform_int(10**9) for _ in range(10)]

    def test_values_in_range(self, source_cls: type) -> None:
        source = source_cls(seed=7)
        for n in (1, 2, 10, 2**31, 2**63 - 1):
            for _ in range(50):
                assert 0 <= source.uniform_int(n) < n

    def test_returns_python_int(self, source_cls: type) -> None:
        assert type(source_cls(seed=7).uniform_int(10)) is int

    def test_uniform_int64(self, source_cls: type) -> None:
        source = source_cls(seed=7)
        assert 0 <= source.uniform_int64(100) < 100
        with pytest.raises(RandomSourceError):
            source.uniform_int64(2**63)

    def test_non_positive_bound(self, source_cls: type) -> None:
        with pytest.raises(RandomSourceError):
            source_cls(seed=7).uniform_int(0)

    def test_unseeded_works(self, source_cls: type) -> None:
        assert 0 <= source_cls().uniform_int(5) < 5


def test_names() -> None:
    assert NumpyRandomSource().name == "numpy"
    assert StdlibRandomSource().name == "stdlib"


def test_numpy_rejects_bounds_beyond_int64() -> None:
    with pytest.raises(RandomSourceError):
        NumpyRandomSource(seed=1).uniform_int(2**63)


def test_stdlib_handles_big_bounds() -> None:
    assert 0 <= StdlibRandomSource(seed=1).uniform_int(2**80) < 2**80
