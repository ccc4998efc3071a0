"""
Structured logging configuration.
Log output goes to stderr so it never mixes with rendered workout data.
"""
import logging
import sys
import time
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog
from structlog.types import Processor

from gymtracker.core.config import Settings, get_settings
from gymtracker.core.exceptions import RecordNotFoundError


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure structured logging for the application."""
    settings = settings or get_settings()

    # Common processors
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    # Reconfiguring replaces our handler instead of stacking a second one
    for existing in list(root_logger.handlers):
        if isinstance(existing.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING))

    # Reduce noise from third-party libraries
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DB_ECHO else logging.WARNING
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


@contextmanager
def track_operation(
    logger: structlog.stdlib.BoundLogger,
    operation: str,
    **context: Any
) -> Generator[None, None, None]:
    """
    Log the duration of a store operation.

    Failures are logged with their type and message, then re-raised.
    An empty single-result lookup is not a failure and logs at info.

    Usage:
        with track_operation(logger, "insert", username=username):
            ...
    """
    start = time.perf_counter()
    try:
        yield
    except RecordNotFoundError:
        logger.info("Store operation found no data", operation=operation, **context)
        raise
    except Exception as e:
        logger.error(
            "Store operation failed",
            operation=operation,
            error_type=type(e).__name__,
            error_message=str(e),
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            **context
        )
        raise
    logger.debug(
        "Store operation completed",
        operation=operation,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
        **context
    )
