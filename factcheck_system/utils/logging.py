"""Structured logging utilities using structlog for pipeline context and tracing."""

import os
import sys
import uuid
from typing import Any, Optional
import structlog
from structlog.processors import JSONRenderer
from structlog.contextvars import merge_contextvars

IS_TTY = sys.stderr.isatty()
LOG_FORMAT = os.getenv("LOG_FORMAT", "console").lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_structured_logging() -> None:
    """
    Configure structured logging with appropriate processors and renderers.

    Uses:
    - Console renderer for development (colorized, human-readable)
    - JSON renderer for production (structured, machine-readable)
    - Context binding for analysis_id
    """
    processors = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if IS_TTY and LOG_FORMAT == "console":
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    else:
        processors.append(JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_structured_logger(
    name: str,
    analysis_id: Optional[str] = None,
    **additional_context: Any,
) -> structlog.BoundLogger:
    """
    Get a structured logger with bound context.

    Args:
        name: Logger name (typically component name)
        analysis_id: Optional analysis ID to bind
        **additional_context: Additional context to bind

    Returns:
        Configured BoundLogger instance with context

    Example:
        >>> logger = get_structured_logger("pipeline", analysis_id="abc-123")
        >>> logger.info("analysis_complete", classification="Likely Real")
    """
    logger = structlog.get_logger(name).bind(component=name)

    if analysis_id:
        logger = logger.bind(analysis_id=analysis_id)

    if additional_context:
        logger = logger.bind(**additional_context)

    return logger


def get_correlation_id() -> str:
    """
    Generate a correlation ID for tracing a single analysis.

    Returns:
        UUID string for correlation
    """
    return str(uuid.uuid4())


configure_structured_logging()


__all__ = [
    "get_structured_logger",
    "get_correlation_id",
    "configure_structured_logging",
]
