"""Configuration defaults and loading for the shift-swap tool."""

from .defaults import ShiftSwapConfig, get_default_config
from .loader import ConfigLoader

__all__ = ["ShiftSwapConfig", "ConfigLoader", "get_default_config"]
