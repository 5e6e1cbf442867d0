"""Utility modules for HTTP Request."""

from .sanitizer import (
    mask_sensitive_data,
    mask_url,
    mask_headers,
    mask_header_lines,
)

__all__ = [
    'mask_sensitive_data',
    'mask_url',
    'mask_headers',
    'mask_header_lines',
]
