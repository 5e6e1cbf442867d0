"""HTTP Request - one-shot synchronous HTTP requests over requests."""

import logging
from importlib.metadata import version, PackageNotFoundError

# Version info - read from package metadata (single source of truth in pyproject.toml)
try:
    __version__ = version("http-request-core")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

from .core.request import Request
from .core.response import Response
from .core.method import Method
from .core.status import ClientStatus
from .core.config import RequestConfig, TimeoutConfig
from .core.form import MultipartForm
from .core.engine import EngineInfo, ensure_initialized, engine_info
from .core.env_config import load_from_env
from .core.logging import LoggingConfig, configure_logging
from .core.exceptions import (
    HTTPRequestException,
    ConfigurationError,
    EngineInitError,
    RequestClosedError,
    FormError,
    FormNotInitializedError,
    FormAlreadyInitializedError,
)

# Users can configure logging themselves using logging.getLogger('http_request')
logging.getLogger('http_request').addHandler(logging.NullHandler())

__author__ = "HTTP Request Contributors"
__license__ = "MIT"

__all__ = [
    # Core
    "Request",
    "Response",
    "Method",
    "ClientStatus",
    "MultipartForm",

    # Config
    "RequestConfig",
    "TimeoutConfig",
    "LoggingConfig",
    "load_from_env",
    "configure_logging",

    # Engine
    "EngineInfo",
    "ensure_initialized",
    "engine_info",

    # Exceptions
    "HTTPRequestException",
    "ConfigurationError",
    "EngineInitError",
    "RequestClosedError",
    "FormError",
    "FormNotInitializedError",
    "FormAlreadyInitializedError",

    # Version
    "__version__",
]
