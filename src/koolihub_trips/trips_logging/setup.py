"""Logging setup and configuration."""

import logging
import sys
from typing import TYPE_CHECKING

from .context import ContextFilter
from .filters import DefaultCorrelationFilter, PIIFilter
from .formatters import DevFormatter, JSONFormatter

if TYPE_CHECKING:
    from koolihub_trips.settings import LoggingSettings


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    environment: str = "development",
) -> None:
    """Configure the root logger with appropriate formatter and filters."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)

    if json_output:
        handler.setFormatter(JSONFormatter(environment))
    else:
        handler.setFormatter(DevFormatter())

    handler.addFilter(PIIFilter())
    # Context fields must be set before the correlation placeholder
    handler.addFilter(ContextFilter())
    handler.addFilter(DefaultCorrelationFilter())

    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))


def setup_logging_from_settings(settings: "LoggingSettings") -> None:
    setup_logging(
        level=settings.level,
        json_output=settings.format == "json",
        environment=settings.environment,
    )
