"""
Structured logging setup for keyfmt.
Path: keyfmt/utils/logging.py
"""

import logging
import sys

import structlog

_LEVELS = {
    "debug": logging.DEBUG,
    "normal": logging.INFO,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(level: str = "normal") -> None:
    """
    Configure structlog with console rendering at the requested level.

    Args:
        level: One of debug, normal/info, warning, error
    """
    log_level = _LEVELS.get(str(level).lower(), logging.INFO)
    logging.basicConfig(level=log_level)
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr)
    )
