"""Configuration module for evented."""

from evented.config.logging import configure_logging, get_logger
from evented.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_logger", "get_settings"]
