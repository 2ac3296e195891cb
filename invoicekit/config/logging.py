"""
Structured logging configuration using structlog.

Console output in development, JSON lines elsewhere. Events logged while an
API request is in flight carry its ``request_id``, so store fallbacks and
render events can be tied back to the request that caused them.
"""

import logging
import sys

import structlog
from structlog.types import Processor

from invoicekit.config.settings import get_settings

REQUEST_ID_KEY = "request_id"

# Transport and driver chatter; remote fallbacks are logged by the store itself
QUIET_LOGGERS = ("httpx", "httpcore", "aiosqlite", "uvicorn.access")


def bind_request_context(request_id: str, **fields: str) -> None:
    """Attach a request id (and optional fields) to every event in this context."""
    structlog.contextvars.bind_contextvars(**{REQUEST_ID_KEY: request_id}, **fields)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


def configure_logging() -> None:
    """Configure structlog for the application."""
    settings = get_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.environment == "development":
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
        processors = shared_processors + [renderer]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
