"""
Log filters: per-thread correlation id and static extra fields.
"""

import logging
import threading
from typing import Dict, Any, Optional


_correlation_id_storage = threading.local()


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID for the current thread."""
    _correlation_id_storage.value = correlation_id


def get_correlation_id() -> Optional[str]:
    """Correlation ID of the current thread, or None."""
    return getattr(_correlation_id_storage, 'value', None)


def clear_correlation_id() -> None:
    if hasattr(_correlation_id_storage, 'value'):
        delattr(_correlation_id_storage, 'value')


class CorrelationIdFilter(logging.Filter):
    """
    Adds `correlation_id` to records logged while a request executes.

    Example:
        >>> set_correlation_id("9f1c...")
        >>> logger.info("Request started")  # ... correlation_id=9f1c...
    """

    def filter(self, record: logging.LogRecord) -> bool:
        correlation_id = get_correlation_id()
        if correlation_id and not hasattr(record, 'correlation_id'):
            record.correlation_id = correlation_id
        return True


class ExtraFieldsFilter(logging.Filter):
    """
    Adds static fields (service, environment, ...) to every record.
    Fields already present on the record win.
    """

    def __init__(self, extra_fields: Dict[str, Any]):
        super().__init__()
        self.extra_fields = dict(extra_fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.extra_fields.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
