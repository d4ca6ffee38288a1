"""
Structured logging configuration for moviekit.

This module sets up structured logging using structlog with:
- JSON formatting by default
- Console formatting for development
- Context variable propagation
- Configurable log levels via environment variables

Diagnostics are printed to standard output.
"""

import logging
import structlog
from typing import Any, Dict, Optional

from moviekit.config import LOG_LEVEL, DEBUG


def add_app_context(logger: Any, method_name: str, event_dict: Dict) -> Dict:
    """
    Add application context to log entries.

    Args:
        logger: Logger instance
        method_name: Logging method name
        event_dict: Event dictionary to enhance

    Returns:
        Enhanced event dictionary
    """
    event_dict["service"] = "moviekit"
    return event_dict


def configure_structlog(debug: Optional[bool] = None, level: Optional[str] = None):
    """
    Configure structlog for the library.

    Args:
        debug: Use the console renderer instead of JSON (defaults to DEBUG)
        level: Minimum log level name (defaults to LOG_LEVEL)
    """
    if debug is None:
        debug = DEBUG
    if level is None:
        level = LOG_LEVEL

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # capture_logs only sees loggers that are rebuilt on each use
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """
    Get a configured structlog logger.

    Args:
        name: Optional logger name (defaults to calling module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


# Configure logging on module import
configure_structlog()
