"""
Storage error classifications.

These represent a backing document that cannot be trusted or reached and
usually need someone to look at the file.
"""

from typing import Optional

from .base import ShiftSwapError


class StorageError(ShiftSwapError):
    """Base class for backing file failures."""


class CorruptDataError(StorageError):
    """Backing file is not JSON or does not have the document shape."""

    def __init__(self, message: str, path: Optional[str] = None,
                 reason: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
        self.reason = reason


class PersistenceError(StorageError):
    """File system failure while reading or writing the document."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.target = target
