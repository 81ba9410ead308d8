"""Structured logging."""

from .logger import configure_logging, get_logger
from .logging_adapter import LoggingAdapter

__all__: list[str] = ["LoggingAdapter", "configure_logging", "get_logger"]
