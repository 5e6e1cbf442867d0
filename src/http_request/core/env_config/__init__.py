"""
Environment configuration for HTTP Request.

Example:
    >>> from http_request.core.env_config import load_from_env
    >>> config = load_from_env(env_file=".env")
"""

from .loader import load_from_env
from .validator import RequestSettings

__all__ = [
    "load_from_env",
    "RequestSettings",
]
