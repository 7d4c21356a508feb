"""Configuration management.

Loads from TOML config files + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_LOG_FORMATS = frozenset({"json", "console"})


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"


class OrderPolicyConfig(BaseModel):
    reject_empty_orders: bool = False
    event_topic: str = "order"


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level application settings.

    Loaded from TOML config files, overridden by environment variables.
    """

    orders: OrderPolicyConfig = Field(default_factory=OrderPolicyConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "ORDERS_", "env_nested_delimiter": "__"}

    def validate_observability(self) -> None:
        """Reject log settings that ``setup_logging`` cannot honour."""
        from .errors import ConfigError

        level = self.observability.log_level.upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.observability.log_level}")
        if self.observability.log_format not in _LOG_FORMATS:
            raise ConfigError(
                f"Unknown log format: {self.observability.log_format} "
                f"(expected one of {sorted(_LOG_FORMATS)})"
            )


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.  Nested sections are
            merged key by key into the file's tables.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            with open(path, "rb") as f:
                data = tomli.load(f)

    if overrides:
        data = _deep_merge(data, overrides)

    return Settings(**data)


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged
