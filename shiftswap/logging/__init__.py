"""
Logging configuration and utilities for the shift-swap tool.
"""
from .config import configure_logging, get_logger, log_status_change

__all__ = ["configure_logging", "get_logger", "log_status_change"]
