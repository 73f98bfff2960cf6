"""
Centralized logging configuration for the shift-swap tool.

All modules obtain loggers through get_logger so output is structured and
formatted the same way whether it ends up on a console or in a log pipeline.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    stream: Optional[TextIO] = None,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        stream: Destination stream, defaults to stderr so stdout stays
            free for command output
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def log_status_change(
    logger: FilteringBoundLogger,
    request_id: str,
    from_status: str,
    to_status: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a request status change with standardized format.

    Args:
        logger: Structlog logger instance
        request_id: ID of the request being reviewed
        from_status: Status before the change
        to_status: Status after the change
        context: Additional context data
    """
    bound_logger = logger.bind(
        request_id=request_id,
        from_status=from_status,
        to_status=to_status,
        audit_trail=True,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if from_status != to_status and from_status != "PENDING":
        bound_logger.warning("Status change on reviewed request")
    else:
        bound_logger.info("Status change")
