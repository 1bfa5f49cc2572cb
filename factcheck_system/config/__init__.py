"""Configuration: settings, logging and static rule tables.

Importing this package configures loguru from settings.
"""

from factcheck_system.config.settings import Settings, settings
from factcheck_system.config.logging import configure_logging, get_logger

__all__ = ["Settings", "settings", "configure_logging", "get_logger"]
