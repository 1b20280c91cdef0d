"""
Logging setup.

Configures the stdlib root logger from a LoggingConfig and routes structlog
through it, so library modules can log with structlog key/value context while
the hosting application keeps control of handlers and formats.
"""

from __future__ import annotations

import logging
import sys

import structlog

from github_webhook_extract.core.config.logging_config import LoggingConfig


def setup_logging(logging_config: LoggingConfig) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        logging_config: Level, format and optional file path to log to
    """
    log_level = getattr(logging, logging_config.level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if logging_config.file_path:
        handlers.append(logging.FileHandler(logging_config.file_path))

    logging.basicConfig(
        level=log_level,
        format=logging_config.format,
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.getLogger(__name__).info("Logging configured: level=%s", logging_config.level)
