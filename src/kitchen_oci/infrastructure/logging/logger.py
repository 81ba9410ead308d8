"""Structured logging built on structlog and the standard logging module."""

import logging
import sys
from typing import Any, Optional

import structlog

from kitchen_oci.config.settings import get_logging_config

_configured = False

_shared_processors: list[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    # report the caller of LoggingAdapter, not the adapter
    structlog.processors.CallsiteParameterAdder(
        parameters={
            structlog.processors.CallsiteParameter.FILENAME,
            structlog.processors.CallsiteParameter.FUNC_NAME,
            structlog.processors.CallsiteParameter.LINENO,
        },
        additional_ignores=["kitchen_oci.infrastructure.logging"],
    ),
]


def configure_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    stream: Any = None,
) -> None:
    """
    Set up structured logging for the engine.

    :param log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    :param log_format: "console" for human readable lines, "json" for one JSON object per line.
    :param stream: Stream the handler writes to, stderr by default.
    """
    global _configured

    log_config = get_logging_config()
    log_level = (log_level or log_config.level).upper()
    log_format = log_format or log_config.format

    renderer: Any
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=_shared_processors,
        )
    )

    root = logging.getLogger("kitchen_oci")
    root.handlers = [handler]
    root.setLevel(getattr(logging, log_level, logging.INFO))
    root.propagate = False
    _configured = True


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to ``name``, configuring logging on first use."""
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
