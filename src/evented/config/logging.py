"""structlog configuration."""

import logging

import structlog

from evented.config.settings import get_settings
from evented.core.exceptions import ConfigurationError

_RENDERERS = {
    "console": lambda: structlog.dev.ConsoleRenderer(colors=False),
    "json": lambda: structlog.processors.JSONRenderer(),
}


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure structlog for the process.

    Args:
        level: Minimum level name, e.g. ``"DEBUG"``. Defaults to settings.
        fmt: ``"console"`` or ``"json"``. Defaults to settings.

    Raises:
        ConfigurationError: If the level or format is unknown.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    fmt = fmt or settings.log_format

    levels = logging.getLevelNamesMapping()
    if level_name not in levels:
        raise ConfigurationError(
            f"Unknown log level: {level_name}", details={"level": level_name}
        )
    if fmt not in _RENDERERS:
        raise ConfigurationError(
            f"Unknown log format: {fmt}", details={"format": fmt}
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _RENDERERS[fmt](),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(levels[level_name]),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None):
    """Return a structlog logger bound to *name*."""
    return structlog.get_logger(name)
