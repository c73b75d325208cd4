"""Logging setup for the command line tool and the API server."""

import logging
import sys

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Install the console structlog pipeline.

    Log lines go to stderr so the CLI's JSON output on stdout stays clean.

    Args:
        verbose: Log at DEBUG level instead of INFO.
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )
