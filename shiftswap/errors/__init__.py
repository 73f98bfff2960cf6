"""
Error classification for the shift-swap tool.

Request errors describe bad caller input and can be corrected by retrying
with different arguments. Storage errors describe a backing file that cannot
be read or written.
"""

from .base import ShiftSwapError, ConfigurationError, IdGenerationError
from .requests import (
    RequestError,
    ValidationError,
    NotFoundError,
)
from .storage import (
    StorageError,
    CorruptDataError,
    PersistenceError,
)

__all__ = [
    "ShiftSwapError",
    "ConfigurationError",
    "IdGenerationError",
    # Request Errors
    "RequestError",
    "ValidationError",
    "NotFoundError",
    # Storage Errors
    "StorageError",
    "CorruptDataError",
    "PersistenceError",
]
