"""Persistence layer for the request document."""

from .request_store import RequestStore

__all__ = ["RequestStore"]
