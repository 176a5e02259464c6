"""Structured logging configuration for titlecache."""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.typing import EventDict, WrappedLogger

from titlecache import __version__

# Chatty libraries that log every request at INFO.
NOISY_LOGGERS = ("httpx", "httpcore")


def add_service_info(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """Tag every event with the service name and version."""
    event_dict.setdefault("service", "titlecache")
    event_dict.setdefault("version", __version__)
    return event_dict


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Name of the minimum level to emit.
        json_logs: Emit JSON lines if True, readable console output otherwise.
        stream: Where to write logs. Defaults to the current sys.stdout.
    """
    level = getattr(logging, log_level.upper())
    stream = stream or sys.stdout
    logging.basicConfig(format="%(message)s", stream=stream, level=level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    renderer: Any = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_service_info,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structured logger bound to a module name.

    Returns Any because the concrete logger type depends on what
    setup_logging() configured.
    """
    return structlog.get_logger(name)
