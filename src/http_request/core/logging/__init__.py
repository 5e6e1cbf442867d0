"""
Logging system for HTTP Request.

Example:
    >>> from http_request.core.logging import configure_logging, LoggingConfig
    >>>
    >>> logger = configure_logging(LoggingConfig.create(level="DEBUG", format="json"))
    >>> logger.info("Request started", method="GET", url="https://api.com")
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .logger import (
    HTTPRequestLogger,
    get_logger,
    configure_logging,
    logger_for,
    shutdown_logging,
)
from .formatters import JSONFormatter, TextFormatter, ColoredFormatter, get_formatter
from .filters import (
    CorrelationIdFilter,
    ExtraFieldsFilter,
    set_correlation_id,
    get_correlation_id,
    clear_correlation_id,
)
from .handlers import create_console_handler, create_file_handler

__all__ = [
    # Config
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Logger
    "HTTPRequestLogger",
    "get_logger",
    "configure_logging",
    "logger_for",
    "shutdown_logging",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "ColoredFormatter",
    "get_formatter",
    # Filters
    "CorrelationIdFilter",
    "ExtraFieldsFilter",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    # Handlers
    "create_console_handler",
    "create_file_handler",
]
