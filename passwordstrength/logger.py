"""
Logging for passwordstrength.

Modules log through get_logger(), which uses whatever structlog configuration
the host application has set up. configure_logging() is only a convenience for
applications that have none; the package never calls it on its own.

Nothing here logs a raw or normalized password. Per-password events carry at
most its code-point length and the outcome.
"""

import logging
import sys

import structlog

from passwordstrength.config import config


def configure_logging(log_level: str | None = None) -> None:
    """
    Send JSON log lines to stdout.

    Args:
        log_level: minimum level name; defaults to PASSWORDSTRENGTH_LOG_LEVEL
    """
    level = getattr(logging, (log_level or config.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def get_logger(name: str):
    return structlog.get_logger(name)
