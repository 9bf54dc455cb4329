"""Tests for weightedrand.config.

Covers:
- Default values
- Environment variable loading (monkeypatch os.environ)
- Field validation (bounds, log level)
- resolve_config merge logic and error wrapping
- validate_overrides rejects unknown fields
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from weightedrand.config import WeightedRandConfig, resolve_config, validate_overrides
from weightedrand.exceptions import ConfigValidationError


class TestDefaults:
    """Verify default values."""

    def test_defaults(self, default_config: WeightedRandConfig) -> None:
        assert default_config.decimal_precision == 28
        assert default_config.coin_resolution == 100
        assert default_config.random_source_type == "system"
        assert default_config.random_seed is None
        assert default_config.log_level == "none"
        assert default_config.diagnostic_mode is False


class TestEnvironment:
    """Environment variables with the WR_ prefix override defaults."""

    def test_env_vars_loaded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WR_COIN_RESOLUTION", "1000000")
        monkeypatch.setenv("WR_RANDOM_SOURCE_TYPE", "numpy")
        monkeypatch.setenv("WR_RANDOM_SEED", "42")
        monkeypatch.setenv("WR_DIAGNOSTIC_MODE", "true")
        cfg = WeightedRandConfig(_env_file=None)  # type: ignore[call-arg]
        assert cfg.coin_resolution == 1_000_000
        assert cfg.random_source_type == "numpy"
        assert cfg.random_seed == 42
        assert cfg.diagnostic_mode is True

    def test_init_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WR_COIN_RESOLUTION", "1000")
        cfg = WeightedRandConfig(_env_file=None, coin_resolution=500)  # type: ignore[call-arg]
        assert cfg.coin_resolution == 500

    def test_unprefixed_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COIN_RESOLUTION", "1000")
        cfg = WeightedRandConfig(_env_file=None)  # type: ignore[call-arg]
        assert cfg.coin_resolution == 100

    def test_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / "test.env"
        env_file.write_text("WR_DECIMAL_PRECISION=40\nWR_LOG_LEVEL=full\n")
        cfg = WeightedRandConfig(_env_file=env_file)  # type: ignore[call-arg]
        assert cfg.decimal_precision == 40
        assert cfg.log_level == "full"


class TestValidation:
    """Field constraints."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"coin_resolution": 1},
            {"coin_resolution": 2**63},
            {"decimal_precision": 4},
            {"log_level": "verbose"},
        ],
    )
    def test_invalid_values_rejected(self, overrides: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            WeightedRandConfig(_env_file=None, **overrides)  # type: ignore[arg-type]

    @pytest.mark.parametrize("level", ["none", "summary", "full"])
    def test_valid_log_levels(self, level: str) -> None:
        cfg = WeightedRandConfig(_env_file=None, log_level=level)  # type: ignore[call-arg]
        assert cfg.log_level == level


class TestResolveConfig:
    """Merging overrides into a base config."""

    def test_no_overrides_returns_defaults(self, default_config: WeightedRandConfig) -> None:
        assert resolve_config(default_config, None) is default_config
        assert resolve_config(default_config, {}) is default_config

    def test_overrides_applied(self, default_config: WeightedRandConfig) -> None:
        cfg = resolve_config(default_config, {"coin_resolution": 1000, "random_seed": 3})
        assert cfg.coin_resolution == 1000
        assert cfg.random_seed == 3
        assert cfg.random_source_type == default_config.random_source_type

    def test_defaults_not_mutated(self, default_config: WeightedRandConfig) -> None:
        resolve_config(default_config, {"coin_resolution": 1000})
        assert default_config.coin_resolution == 100

    def test_string_values_coerced(self, default_config: WeightedRandConfig) -> None:
        cfg = resolve_config(default_config, {"coin_resolution": "250"})
        assert cfg.coin_resolution == 250

    def test_unknown_field_rejected(self, default_config: WeightedRandConfig) -> None:
        with pytest.raises(ConfigValidationError, match="no_such_field"):
            resolve_config(default_config, {"no_such_field": 1})

    def test_invalid_value_wrapped(self, default_config: WeightedRandConfig) -> None:
        with pytest.raises(ConfigValidationError):
            resolve_config(default_config, {"coin_resolution": 0})

    def test_validate_overrides_accepts_known(self) -> None:
        validate_overrides({"log_level": "full", "decimal_precision": 50})
