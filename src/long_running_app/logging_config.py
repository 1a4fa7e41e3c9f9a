import logging
import sys

import structlog


def configure_logging(level: str = "WARNING") -> None:
    """Configure structured logging. Diagnostics go to stderr; stdout is reserved for counter output."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(**kwargs: object) -> structlog.BoundLogger:
    """Get a structured logger, optionally bound to extra context."""
    log = structlog.get_logger()
    if kwargs:
        log = log.bind(**kwargs)
    return log
