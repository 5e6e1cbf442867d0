"""Core HTTP Request модули."""

from .config import RequestConfig, TimeoutConfig
from .engine import EngineInfo, ensure_initialized, engine_info, is_initialized
from .exceptions import (
    HTTPRequestException,
    FatalError,
    ConfigurationError,
    EngineInitError,
    RequestClosedError,
    FormError,
    FormNotInitializedError,
    FormAlreadyInitializedError,
)
from .form import MultipartForm, FilePart, FieldPart
from .method import Method, METHOD_VERBS, method_to_verb
from .request import Request
from .response import Response, make_response
from .status import ClientStatus, is_client_error

__all__ = [
    # Config
    "RequestConfig",
    "TimeoutConfig",
    # Engine
    "EngineInfo",
    "ensure_initialized",
    "engine_info",
    "is_initialized",
    # Request / Response
    "Request",
    "Response",
    "make_response",
    "Method",
    "METHOD_VERBS",
    "method_to_verb",
    "ClientStatus",
    "is_client_error",
    # Form
    "MultipartForm",
    "FilePart",
    "FieldPart",
    # Exceptions
    "HTTPRequestException",
    "FatalError",
    "ConfigurationError",
    "EngineInitError",
    "RequestClosedError",
    "FormError",
    "FormNotInitializedError",
    "FormAlreadyInitializedError",
]
