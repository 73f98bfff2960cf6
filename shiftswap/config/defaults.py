"""Default configuration parameters for the shift-swap tool."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StoreParams:
    """Backing document parameters."""
    data_file: str = "data/requests.json"            # Relative to cwd unless absolute
    indent: int = 2                                  # Pretty-print width


@dataclass(frozen=True)
class IdParams:
    """Request identifier generation parameters."""
    token_bytes: int = 6                             # 12 hex characters


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class ShiftSwapConfig:
    """Complete tool configuration."""
    store: StoreParams = field(default_factory=StoreParams)
    ids: IdParams = field(default_factory=IdParams)
    logging: LoggingParams = field(default_factory=LoggingParams)


def get_default_config() -> ShiftSwapConfig:
    """Get default configuration instance."""
    return ShiftSwapConfig()
