"""Root of the shift-swap exception hierarchy."""

from typing import Any, Optional


class ShiftSwapError(Exception):
    """Base class for every error raised by the package."""

    recoverable = False

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ConfigurationError(ShiftSwapError):
    """Configuration file is unreadable or holds invalid values."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source


class IdGenerationError(ShiftSwapError):
    """No unused request id could be drawn."""

    def __init__(self, message: str, attempts: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.attempts = attempts
