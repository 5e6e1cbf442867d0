# src/http_request/core/request.py
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union, TYPE_CHECKING
import time
import uuid
import warnings

import requests
from requests.structures import CaseInsensitiveDict

from .config import RequestConfig, TimeoutConfig
from .engine import create_handle, ensure_initialized
from .errors import fill_error_buffer, format_error_string
from .exceptions import (
    EngineInitError,
    FormAlreadyInitializedError,
    FormNotInitializedError,
    RequestClosedError,
)
from .form import MultipartForm
from .method import Method, method_to_verb
from .response import Response, make_response
from .status import ClientStatus
from ..utils.sanitizer import mask_header_lines, mask_url

# Delayed import to avoid circular dependency
if TYPE_CHECKING:
    from .logging import HTTPRequestLogger


HANDLE_UNAVAILABLE = "engine handle is not available"


def _wire_value(value: str) -> bytes:
    """Header value as sent: http.client would reject non-Latin-1 str."""
    return value.encode('utf-8')


class Request:
    """
    Один HTTP запрос: накопление конфигурации и блокирующий execute().

    Request владеет тремя независимыми ресурсами: handle движка
    (requests.Session), списком строк заголовков и multipart формой.
    close() освобождает каждый ровно один раз.

    Ошибки передачи (DNS, соединение, TLS, таймаут) не выбрасываются,
    а возвращаются в Response (error=True, status_code из ClientStatus).
    Исключения выбрасываются только при неправильном использовании API.

    Example:
        >>> with Request(Method.POST, "https://httpbin.org/post") as req:
        ...     req.set_header("X-Trace", "1")
        ...     req.set_body('{"name": "John"}')
        ...     response = req.execute()
        >>> response.status_code
        200

    Повторный execute() поддерживается: конфигурация применяется заново и
    выполняется новая передача. Основной сценарий - один execute() на запрос.
    """

    def __init__(
        self,
        method: Union[Method, int, str],
        url: str,
        config: Optional[RequestConfig] = None
    ):
        """
        Create request and acquire a transfer handle.

        Args:
            method: Method member, its value or name. Unknown values mean GET.
            url: Target URL
            config: Initial settings (verify_ssl, proxy, user agent, ...)

        Raises:
            EngineInitError: If the engine could not create a handle
        """
        config = config or RequestConfig()

        self._url = url
        self._method = method_to_verb(method)
        self._config = config
        self._header_lines: List[str] = []
        self._form: Optional[MultipartForm] = None
        self._body: Optional[bytes] = None
        self._timeout: Optional[TimeoutConfig] = config.timeout
        self._error_buffer = ""
        self._user_agent_set = False
        self._handle: Optional[requests.Session] = None

        logger_instance: Optional['HTTPRequestLogger'] = None
        if config.logging:
            from .logging import logger_for
            logger_instance = logger_for(config.logging)
        self._logger = logger_instance

        try:
            self._handle = create_handle(max_redirects=config.max_redirects)
        except Exception as e:
            raise EngineInitError(url, e) from e

        self._handle.verify = config.verify_ssl
        if config.proxy:
            self.set_proxy(config.proxy)
        if config.user_agent:
            self.set_user_agent(config.user_agent)

    # ==================== Accessors ====================

    def get_url(self) -> str:
        return self._url

    def get_method(self) -> str:
        """Wire-level verb, e.g. "GET"."""
        return self._method

    def get_headers(self) -> List[str]:
        """Header lines in the order they were added."""
        return list(self._header_lines)

    @property
    def form(self) -> Optional[MultipartForm]:
        return self._form

    @property
    def closed(self) -> bool:
        return self._handle is None

    @property
    def error_buffer(self) -> str:
        """Diagnostic text of the last failed execute()."""
        return self._error_buffer

    # ==================== Setters ====================

    def _require_handle(self) -> requests.Session:
        if self._handle is None:
            raise RequestClosedError(self._url)
        return self._handle

    def set_verify_ssl(self, verify: bool) -> None:
        """Toggle TLS peer verification."""
        self._require_handle().verify = bool(verify)

    def set_proxy(self, proxy: str) -> None:
        """
        Send http and https traffic through proxy. An empty string clears it.
        """
        handle = self._require_handle()
        if proxy:
            handle.proxies = {'http': proxy, 'https': proxy}
        else:
            handle.proxies = {}

    def set_header(self, name: str, value: str) -> None:
        """
        Append a "name: value" header line.

        Duplicate names are all kept. An empty value removes a header the
        engine would otherwise send by default.
        """
        self._require_handle()
        self._header_lines.append(f"{name}: {value}")

    def set_body(self, data: Union[str, bytes]) -> None:
        """Set request payload. The data is copied; str is encoded as UTF-8."""
        self._require_handle()
        self._body = data.encode('utf-8') if isinstance(data, str) else bytes(data)

    def set_user_agent(self, user_agent: str) -> None:
        """Set User-Agent on the handle, independent of set_header()."""
        self._require_handle().headers['User-Agent'] = _wire_value(user_agent)
        self._user_agent_set = True

    def set_timeout(self, timeout: Optional[Union[float, Tuple[float, float], TimeoutConfig]]) -> None:
        """Set (connect, read) timeouts; a number sets the read timeout. None disables."""
        self._require_handle()
        self._timeout = TimeoutConfig.from_value(timeout) if timeout is not None else None

    # ==================== Multipart form ====================

    def make_form(self) -> MultipartForm:
        """
        Create the multipart form. Must precede add_file()/add_field().

        Raises:
            FormAlreadyInitializedError: If the form already exists
        """
        self._require_handle()
        if self._form is not None:
            raise FormAlreadyInitializedError()
        self._form = MultipartForm()
        return self._form

    def _require_form(self, field_name: str) -> MultipartForm:
        self._require_handle()
        if self._form is None:
            raise FormNotInitializedError(field_name)
        return self._form

    def add_file(self, field_name: str, file_path: str, filename: Optional[str] = None) -> None:
        """
        Attach a file part.

        The file is read during execute(), so it must exist and stay
        unchanged until execute() returns.

        Args:
            field_name: Form field name
            file_path: Path on disk
            filename: Filename reported to the server (default: basename)
        """
        self._require_form(field_name).add_file(field_name, file_path, filename)

    def add_field(self, field_name: str, data: Union[str, bytes], size: Optional[int] = None) -> None:
        """Attach an in-memory part holding the first `size` bytes of data."""
        self._require_form(field_name).add_field(field_name, data, size)

    # ==================== Execution ====================

    def _build_headers(self) -> Optional[CaseInsensitiveDict]:
        """
        Fold header lines into the engine's mapping.

        Repeated names are joined with ", ". An empty value maps to None,
        which tells requests to drop that header. Values go out as UTF-8.
        """
        if not self._header_lines:
            return None

        folded: Dict[str, Optional[str]] = {}
        names: Dict[str, str] = {}
        for line in self._header_lines:
            name, _, value = line.partition(':')
            name, value = name.strip(), value.strip()
            key = names.setdefault(name.lower(), name)
            if not value:
                folded[key] = None
                continue
            existing = folded.get(key)
            folded[key] = value if existing is None else f"{existing}, {value}"

        return CaseInsensitiveDict({
            name: None if value is None else _wire_value(value)
            for name, value in folded.items()
        })

    @contextmanager
    def _payload(self) -> Iterator[Dict[str, Any]]:
        """
        Body kwargs for requests; form files stay open for the transfer.

        A form with parts replaces the body. An empty form is ignored.
        """
        if self._form is not None and len(self._form):
            if self._body is not None and self._logger:
                self._logger.warning(
                    "Request body ignored, multipart form takes precedence",
                    method=self._method,
                    url=mask_url(self._url),
                )
            with self._form.open() as files:
                yield {'files': files}
        elif self._body is not None:
            yield {'data': self._body}
        else:
            yield {}

    def execute(self) -> Response:
        """
        Perform the transfer and return its Response.

        Never raises for transfer failures; check `error` and
        `status_code` of the result.
        """
        start_time = time.time()

        if self._handle is None:
            response = make_response(
                self._url, ClientStatus.INIT_ERROR, error_string=HANDLE_UNAVAILABLE
            )
            self._log_result(response, start_time)
            return response

        info = ensure_initialized()
        if not self._user_agent_set:
            self._handle.headers['User-Agent'] = info.user_agent
        self._error_buffer = ""

        request_id = str(uuid.uuid4())
        if self._logger:
            from .logging.filters import set_correlation_id
            set_correlation_id(request_id)
            self._logger.info(
                "Request started",
                method=self._method,
                url=mask_url(self._url),
                headers=mask_header_lines(self._header_lines),
                has_body=self._body is not None,
                form_parts=len(self._form) if self._form is not None else 0,
            )

        try:
            with self._payload() as payload:
                raw = self._handle.request(
                    method=self._method,
                    url=self._url,
                    headers=self._build_headers(),
                    allow_redirects=True,
                    verify=self._handle.verify,
                    proxies=dict(self._handle.proxies),
                    timeout=self._timeout.as_tuple() if self._timeout else None,
                    **payload
                )
                content = raw.content
                text = raw.text
                status_code = raw.status_code
                raw.close()
        except (requests.exceptions.RequestException, OSError, UnicodeError) as e:
            self._error_buffer = fill_error_buffer(e, self._config.error_buffer_size)
            response = make_response(
                self._url,
                ClientStatus.PERFORM_ERROR,
                error_string=format_error_string(e, self._error_buffer),
            )
        else:
            response = make_response(self._url, status_code, text=text, content=content)

        self._log_result(response, start_time, request_id)
        return response

    def _log_result(self, response: Response, start_time: float, request_id: Optional[str] = None) -> None:
        if not self._logger:
            return

        duration_ms = round((time.time() - start_time) * 1000, 2)
        if response.error:
            self._logger.error(
                "Request failed",
                method=self._method,
                url=mask_url(self._url),
                status_code=response.status_code,
                error=response.error_string,
                duration_ms=duration_ms,
            )
        else:
            self._logger.info(
                "Request completed",
                method=self._method,
                url=mask_url(self._url),
                status_code=response.status_code,
                response_size=len(response.content),
                duration_ms=duration_ms,
            )

        if request_id is not None:
            from .logging.filters import clear_correlation_id
            clear_correlation_id()

    # ==================== Ownership ====================

    def move(self) -> 'Request':
        """
        Transfer all resources to a new Request.

        This instance is left empty: closing it is a no-op and execute()
        returns an INIT_ERROR response.
        """
        target = object.__new__(type(self))
        target.__dict__.update(self.__dict__)

        self._handle = None
        self._form = None
        self._header_lines = []
        self._body = None
        self._url = ""
        self._error_buffer = ""
        return target

    def close(self) -> None:
        """
        Release handle, header list and form. Safe to call multiple times.
        """
        handle, self._handle = self._handle, None
        form, self._form = self._form, None
        self._header_lines = []
        self._body = None

        if handle is not None:
            handle.close()
        if form is not None:
            form.free()

    def __enter__(self) -> 'Request':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __del__(self):
        """
        Release resources left open, with a ResourceWarning.

        Best practice: use the context manager or call close() explicitly.
        """
        try:
            if getattr(self, '_handle', None) is not None or getattr(self, '_form', None) is not None:
                warnings.warn(
                    f"Request to {mask_url(self._url)} garbage collected without close(). "
                    "Use 'with Request(...) as req:' or call req.close() explicitly.",
                    ResourceWarning,
                    stacklevel=2
                )
                self.close()
        except Exception:
            # Interpreter may be shutting down
            pass

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<Request [{self._method}] {mask_url(self._url)} ({state})>"
