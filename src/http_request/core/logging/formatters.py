"""
Log formatters: JSON, plain text and colored text.

Structured fields passed through `extra` are appended to every format.
"""

import json
import logging
from datetime import datetime
from typing import Any, Dict

# LogRecord attributes that are not user fields
_RESERVED_FIELDS = frozenset({
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'message', 'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
    'asctime', 'taskName',
})

_TEXT_FORMAT = '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s'
_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """User fields attached to a record."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_FIELDS and not key.startswith('_')
    }


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Example output:
        {"timestamp": "2024-01-15T10:30:45.123Z", "level": "INFO",
         "logger": "http_request", "message": "Request completed",
         "method": "GET", "status_code": 200}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(extra_fields(record))

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """
    [timestamp] [level] [logger] message key=value ...
    """

    def __init__(self):
        super().__init__(fmt=_TEXT_FORMAT, datefmt=_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        base_msg = super().format(record)
        fields = extra_fields(record)
        if fields:
            base_msg += " " + " ".join(f"{key}={value}" for key, value in fields.items())
        return base_msg


class ColoredFormatter(TextFormatter):
    """TextFormatter with ANSI-colored level names."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[1;31m', # Bold Red
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


_FORMATTERS = {
    "json": JSONFormatter,
    "text": TextFormatter,
    "colored": ColoredFormatter,
}


def get_formatter(format_type: str) -> logging.Formatter:
    """
    Get formatter by name.

    Raises:
        ValueError: If format_type is unknown
    """
    formatter_class = _FORMATTERS.get(format_type.lower())
    if not formatter_class:
        raise ValueError(
            f"Unknown format type: {format_type}. "
            f"Available: {', '.join(_FORMATTERS)}"
        )
    return formatter_class()
