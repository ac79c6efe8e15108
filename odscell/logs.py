import logging
import sys
from typing import Any, List, MutableMapping

import structlog
from lxml.etree import _Element, tostring
from structlog.contextvars import merge_contextvars
from structlog.stdlib import get_logger as get_raw_logger
from structlog.types import Processor

from odscell import settings

Event = MutableMapping[str, Any]


def render_elements(_: Any, __: str, event_dict: Event) -> Event:
    """Render lxml elements passed as log fields as compact markup, so that
    a failing cell shows up in the log the way it appears in the document."""
    for key, value in event_dict.items():
        if isinstance(value, _Element):
            event_dict[key] = tostring(value, pretty_print=False, encoding=str).strip()
    return event_dict


def configure_logging(level: int = logging.DEBUG) -> logging.Logger:
    """Configure log levels and structured logging."""

    base_processors: List[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        merge_contextvars,
        structlog.dev.set_exc_info,
        structlog.processors.UnicodeDecoder(),
        render_elements,
    ]

    formatting_processors: List[Processor]
    if settings.LOG_JSON:
        formatting_processors = [
            structlog.processors.TimeStamper(fmt="iso"),
            format_json,
        ]
    else:
        formatting_processors = [
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=True)
        ]

    processors: List[Processor] = base_processors + formatting_processors

    # configuration for structlog based loggers
    structlog.configure(
        cache_logger_on_first_use=True,
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    stderr_renderer: Processor
    if settings.LOG_JSON:
        stderr_renderer = structlog.processors.JSONRenderer()
    else:
        stderr_renderer = structlog.dev.ConsoleRenderer(
            exception_formatter=structlog.dev.plain_traceback
        )

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            # Also apply all processor for logs coming in through the standard python logging infrastructure
            foreign_pre_chain=processors,
            processor=stderr_renderer,
        )
    )

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


def reset_logging(logger: logging.Logger) -> None:
    logger.handlers.clear()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return get_raw_logger(name)


def format_json(_: Any, __: str, ed: Event) -> Event:
    """Stackdriver uses `message` and `severity` keys to display logs"""
    ed["message"] = ed.pop("event")
    ed["severity"] = ed.pop("level", "info").upper()
    return ed
