"""
Reserved status codes for transfer-level failures.

Real HTTP statuses start at 100, so everything at or below
ClientStatus.CLIENT_ERROR_MAX is free to describe failures that never
produced an HTTP response.
"""

from enum import IntEnum


class ClientStatus(IntEnum):
    """Sentinel statuses reported by Response.status_code."""
    INIT_ERROR = 1  # transfer handle unavailable
    PERFORM_ERROR = 2  # transfer did not complete
    CLIENT_ERROR_MAX = 99


def is_client_error(status_code: int) -> bool:
    """True if status_code lies in the reserved client-error range."""
    return status_code <= ClientStatus.CLIENT_ERROR_MAX
