"""Logging configuration using loguru with automatic dev/prod detection."""

import sys
from loguru import logger

from factcheck_system.config.settings import settings


def configure_logging() -> None:
    """
    Configure loguru based on environment settings.

    Behavior:
    - Development (TTY + console format): Colorized, human-readable output
    - Production (non-TTY or json format): JSON-structured logs to stderr (stdout stays free for CLI output)
    - Respects LOG_LEVEL from settings
    """
    logger.remove()

    is_tty = sys.stderr.isatty()
    use_console_format = settings.log_format.lower() == "console"

    if is_tty and use_console_format:
        logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[component]}</cyan> | <level>{message}</level>",
            level=settings.log_level,
            colorize=True,
        )
    else:
        logger.add(
            sys.stderr,
            format="{message}",
            level=settings.log_level,
            serialize=True,
            diagnose=False,
        )

    # Records logged without a bound component still render in console mode
    logger.configure(extra={"component": "factcheck"})


def get_logger(component: str):
    """
    Get a logger instance bound to a specific component name.

    Args:
        component: Component/module name for log context

    Returns:
        Logger instance with component context

    Example:
        >>> log = get_logger("cli")
        >>> log.info("Analyzing content")
    """
    return logger.bind(component=component)


configure_logging()

__all__ = ["logger", "get_logger", "configure_logging"]
