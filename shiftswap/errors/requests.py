"""
Request error classifications.

These errors come from caller input and leave stored data untouched.
"""

from typing import Optional

from .base import ShiftSwapError


class RequestError(ShiftSwapError):
    """Base class for errors caused by caller input."""

    recoverable = True


class ValidationError(RequestError):
    """One or more required fields are missing or malformed."""

    def __init__(self, message: str, fields: Optional[list[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.fields = fields or []


class NotFoundError(RequestError):
    """No request with the given identifier exists."""

    def __init__(self, message: str, request_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.request_id = request_id
