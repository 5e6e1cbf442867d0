"""
Main logger for HTTP Request.
"""

import logging
import threading
from typing import Any, Dict, Optional, Tuple

from .config import LoggingConfig, LogLevel
from .formatters import get_formatter
from .filters import CorrelationIdFilter, ExtraFieldsFilter
from .handlers import create_console_handler, create_file_handler
from ...utils.sanitizer import mask_sensitive_data

DEFAULT_LOGGER_NAME = "http_request"


class HTTPRequestLogger:
    """
    Wrapper around a stdlib logger configured from LoggingConfig.

    Structured fields are passed as keyword arguments and masked before
    they reach any handler.

    Example:
        >>> logger = HTTPRequestLogger(LoggingConfig.create(level="DEBUG"))
        >>> logger.info("Request completed", method="GET", status_code=200)
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = DEFAULT_LOGGER_NAME):
        self.config = config or LoggingConfig()
        self.name = name
        self._closed = False

        level = self._get_level(self.config.level)

        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.propagate = False

        # Reinitializing replaces previous handlers
        for handler in self._logger.handlers[:]:
            self._logger.removeHandler(handler)
            handler.close()

        filters = []
        if self.config.enable_correlation_id:
            filters.append(CorrelationIdFilter())
        if self.config.extra_fields:
            filters.append(ExtraFieldsFilter(self.config.extra_fields))

        formatter = get_formatter(self.config.format.value)

        if self.config.enable_console:
            self._logger.addHandler(
                create_console_handler(level=level, formatter=formatter, filters=filters)
            )

        if self.config.enable_file and self.config.file_path:
            self._logger.addHandler(
                create_file_handler(
                    file_path=self.config.file_path,
                    level=level,
                    formatter=formatter,
                    max_bytes=self.config.max_bytes,
                    backup_count=self.config.backup_count,
                    filters=filters
                )
            )

    @staticmethod
    def _get_level(level: LogLevel) -> int:
        return getattr(logging, level.value)

    @property
    def logger(self) -> logging.Logger:
        """Underlying stdlib logger."""
        return self._logger

    def log(self, level: int, message: str, **kwargs: Any) -> None:
        self._logger.log(level, message, extra=mask_sensitive_data(kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log(logging.ERROR, message, **kwargs)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """
        Flush and close all handlers. Idempotent.
        """
        if self._closed:
            return

        for handler in self._logger.handlers[:]:
            try:
                handler.flush()
                handler.close()
            except (OSError, ValueError):
                # Stream already closed
                pass
            self._logger.removeHandler(handler)

        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


# Global logger instance (singleton pattern)
_default_logger: Optional[HTTPRequestLogger] = None


def get_logger(config: Optional[LoggingConfig] = None) -> HTTPRequestLogger:
    """
    Get the process-wide logger.

    Created on first call; `config` is only used then. Use
    configure_logging() to replace it.
    """
    global _default_logger

    if _default_logger is None:
        _default_logger = HTTPRequestLogger(config)

    return _default_logger


def configure_logging(config: LoggingConfig) -> HTTPRequestLogger:
    """Replace the process-wide logger with a newly configured one."""
    global _default_logger

    if _default_logger is not None:
        _default_logger.close()
    _default_logger = HTTPRequestLogger(config)
    return _default_logger


# Loggers built from RequestConfig.logging, one per distinct config
_config_loggers: Dict[Tuple, HTTPRequestLogger] = {}
_config_lock = threading.Lock()


def _config_key(config: LoggingConfig) -> Tuple:
    # extra_fields is a dict, so LoggingConfig itself is not hashable
    extra = tuple(sorted((str(k), repr(v)) for k, v in config.extra_fields.items()))
    return (
        config.level,
        config.format,
        config.enable_console,
        config.enable_file,
        config.file_path,
        config.max_bytes,
        config.backup_count,
        config.enable_correlation_id,
        extra,
    )


def logger_for(config: LoggingConfig) -> HTTPRequestLogger:
    """
    Logger for a Request configured with `config`.

    Equal configs share one logger. A different config gets its own
    stdlib logger (http_request.config<N>) and its own handlers, so two
    Requests writing to different files never mix their records.
    """
    key = _config_key(config)

    with _config_lock:
        logger = _config_loggers.get(key)
        if logger is None or logger.closed:
            name = f"{DEFAULT_LOGGER_NAME}.config{len(_config_loggers)}"
            if logger is not None:
                name = logger.name
            logger = HTTPRequestLogger(config, name=name)
            _config_loggers[key] = logger
        return logger


def shutdown_logging() -> None:
    """Close the process-wide logger and every per-config logger."""
    global _default_logger

    with _config_lock:
        for logger in _config_loggers.values():
            logger.close()
        _config_loggers.clear()

    if _default_logger is not None:
        _default_logger.close()
    _default_logger = None
