# src/http_request/core/errors.py
"""
Описание ошибок передачи.

Исключения requests/urllib3 переводятся в символьное имя ошибки движка
и текст для буфера диагностики. Наружу они не пробрасываются - Request
упаковывает их в Response.
"""

import requests
from urllib3.exceptions import MaxRetryError, NameResolutionError

# Символьные имена ошибок движка
RESOLVE_HOST = "Couldn't resolve host name"
CONNECT = "Couldn't connect to server"
CONNECT_PROXY = "Couldn't connect to proxy"
TIMEOUT = "Timeout was reached"
SSL_PEER = "SSL peer certificate or SSH remote key was not OK"
TOO_MANY_REDIRECTS = "Number of redirects hit maximum amount"
URL_MALFORMAT = "URL using bad/illegal format or missing URL"
UNSUPPORTED_PROTOCOL = "Unsupported protocol"
READ_ERROR = "Failed to open/read local data from file/application"
RECV_ERROR = "Failure when receiving data from the peer"
SEND_ERROR = "Failed sending data to the peer"


def _is_name_resolution_failure(exc: requests.exceptions.ConnectionError) -> bool:
    """Проверяет, что причиной ConnectionError стал DNS."""
    reason = exc.args[0] if exc.args else None
    if isinstance(reason, MaxRetryError):
        reason = reason.reason
    return isinstance(reason, NameResolutionError)


def engine_error_name(exc: BaseException) -> str:
    """
    Символьное имя ошибки движка для исключения.

    Порядок проверок важен: ConnectTimeout, ProxyError и SSLError -
    подклассы ConnectionError, а все исключения requests - подклассы OSError.

    Examples:
        >>> engine_error_name(requests.exceptions.ReadTimeout())
        'Timeout was reached'
        >>> engine_error_name(FileNotFoundError(2, "No such file"))
        'Failed to open/read local data from file/application'
    """
    if isinstance(exc, requests.exceptions.Timeout):
        return TIMEOUT

    elif isinstance(exc, requests.exceptions.ProxyError):
        return CONNECT_PROXY

    elif isinstance(exc, requests.exceptions.SSLError):
        return SSL_PEER

    elif isinstance(exc, requests.exceptions.ConnectionError):
        if _is_name_resolution_failure(exc):
            return RESOLVE_HOST
        return CONNECT

    elif isinstance(exc, requests.exceptions.TooManyRedirects):
        return TOO_MANY_REDIRECTS

    elif isinstance(exc, requests.exceptions.InvalidSchema):
        return UNSUPPORTED_PROTOCOL

    elif isinstance(exc, (requests.exceptions.MissingSchema, requests.exceptions.InvalidURL)):
        return URL_MALFORMAT

    elif isinstance(exc, requests.exceptions.RequestException):
        return RECV_ERROR

    elif isinstance(exc, UnicodeError):
        # Имя заголовка или значение, которое нельзя закодировать
        return SEND_ERROR

    elif isinstance(exc, OSError):
        # Локальные файлы multipart формы
        return READ_ERROR

    return RECV_ERROR


def fill_error_buffer(exc: BaseException, size: int) -> str:
    """
    Текст для буфера диагностики фиксированного размера.

    Длина ограничена size - 1 символами.
    """
    return str(exc)[:max(size - 1, 0)]


def format_error_string(exc: BaseException, buffer: str) -> str:
    """'<имя ошибки> <буфер диагностики>'."""
    name = engine_error_name(exc)
    return f"{name} {buffer}" if buffer else name
