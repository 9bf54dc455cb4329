"""Configuration system for weightedrand.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (WR_*) -> .env file -> field defaults.

Per-sampler overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weightedrand.exceptions import ConfigValidationError

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class WeightedRandConfig(BaseSettings):
    """Configuration for weightedrand samplers.

    Resolution order: init kwargs -> env vars (WR_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="WR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Table construction ---

    decimal_precision: int = Field(
        default=28,
        ge=8,
        description="Significant digits for decimal weight normalization",
    )

    # --- Sampling ---

    coin_resolution: int = Field(
        default=100,
        ge=2,
        le=2**63 - 1,
        description="Coin toss granularity M: the fraction is k/M with k in [0, M)",
    )
    random_source_type: str = Field(
        default="system",
        description="Random source identifier: 'system', 'numpy', 'stdlib', 'scripted'",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed passed to seedable sources (None = OS entropy)",
    )

    # --- Logging ---

    log_level: str = Field(
        default="none",
        description="Per-draw logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all draw records in memory for analysis",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        if value not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return value


_ALL_FIELDS = frozenset(WeightedRandConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Reject override keys that do not name a config field.

    Args:
        overrides: Mapping of field name to value.

    Raises:
        ConfigValidationError: If any key is unknown.
    """
    for key in overrides:
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: '{key}'")


def resolve_config(
    defaults: WeightedRandConfig,
    overrides: dict[str, Any] | None,
) -> WeightedRandConfig:
    """Create a new config instance merging defaults with overrides.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Field values to replace, keyed by field name.

    Returns:
        A new WeightedRandConfig with overrides applied, or *defaults*
        itself when there is nothing to override.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation; model_validate coerces and checks.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return WeightedRandConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
