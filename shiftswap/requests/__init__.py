"""
Shift-swap request records and their lifecycle.

Requests start PENDING and are moved to APPROVED or DENIED by a reviewer.
"""

from .lifecycle import RequestLifecycle
from .models import RequestDocument, RequestStatus, SwapRequest

__all__ = [
    "RequestDocument",
    "RequestLifecycle",
    "RequestStatus",
    "SwapRequest",
]
