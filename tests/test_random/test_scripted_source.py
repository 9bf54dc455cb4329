"""Tests for ScriptedRandomSource."""

from __future__ import annotations

import pytest

from weightedrand.exceptions import RandomSourceError
from weightedrand.random.scripted import ScriptedRandomSource


class TestScriptedRandomSource:
    """Replay of a fixed integer sequence."""

    def test_name(self) -> None:
        assert ScriptedRandomSource().name == "scripted"

    def test_default_always_zero(self) -> None:
        source = ScriptedRandomSource()
        assert [source.uniform_int(10) for _ in range(3)] == [0, 0, 0]

    def test_replays_and_cycles(self) -> None:
        source = ScriptedRandomSource([1, 2, 3])
        assert [source.uniform_int(100) for _ in range(5)] == [1, 2, 3, 1, 2]
        assert source.calls == 5

    def test_values_reduced_modulo_bound(self) -> None:
        source = ScriptedRandomSource([7, 12])
        assert source.uniform_int(5) == 2
        assert source.uniform_int64(10) == 2

    def test_empty_values_rejected(self) -> None:
        with pytest.raises(RandomSourceError):
            ScriptedRandomSource([])

    def test_negative_values_rejected(self) -> None:
        with pytest.raises(RandomSourceError):
            ScriptedRandomSource([1, -1])

    def test_bound_checked(self) -> None:
        with pytest.raises(RandomSourceError):
            ScriptedRandomSource().uniform_int(0)
