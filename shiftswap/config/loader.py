"""Configuration loader with 3-tier parameter precedence."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    IdParams,
    LoggingParams,
    ShiftSwapConfig,
    StoreParams,
    get_default_config,
)

CONFIG_ENV_VAR = "SHIFTSWAP_CONFIG"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_file: Optional[Path]
    defaults: ShiftSwapConfig

    @classmethod
    def create(cls, config_file: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader, falling back to $SHIFTSWAP_CONFIG."""
        if config_file is None and os.environ.get(CONFIG_ENV_VAR):
            config_file = Path(os.environ[CONFIG_ENV_VAR])

        return cls(
            config_file=Path(config_file) if config_file is not None else None,
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML config file, if one is configured."""
        if self.config_file is None or not self.config_file.exists():
            return {}

        try:
            with open(self.config_file) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {self.config_file}: {e}",
                source=str(self.config_file),
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Config file {self.config_file} must contain a mapping",
                source=str(self.config_file),
            )
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides, e.g. command-line flags (highest priority)
        2. Config file values
        3. Built-in defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> ShiftSwapConfig:
        """Merge all tiers and build a validated ShiftSwapConfig."""
        merged = self.merge_config(overrides)
        source = str(self.config_file) if self.config_file else None

        try:
            config = ShiftSwapConfig(
                store=StoreParams(**merged.get("store", {})),
                ids=IdParams(**merged.get("ids", {})),
                logging=LoggingParams(**merged.get("logging", {})),
            )
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration key: {e}", source=source) from e

        self._validate(config, source)
        return config

    @staticmethod
    def _validate(config: ShiftSwapConfig, source: Optional[str]) -> None:
        """Reject values the store or id generator cannot work with."""
        if not isinstance(config.store.data_file, str) or not config.store.data_file:
            raise ConfigurationError("store.data_file must be a non-empty string", source=source)
        if not isinstance(config.store.indent, int) or config.store.indent < 0:
            raise ConfigurationError("store.indent must be a non-negative integer", source=source)
        if not isinstance(config.ids.token_bytes, int) or config.ids.token_bytes < 3:
            raise ConfigurationError("ids.token_bytes must be an integer of at least 3", source=source)
        if str(config.logging.level).upper() not in _LOG_LEVELS:
            raise ConfigurationError(
                f"logging.level must be one of {sorted(_LOG_LEVELS)}", source=source
            )

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
