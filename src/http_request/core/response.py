"""Response value returned by Request.execute()."""

from dataclasses import dataclass

from .status import is_client_error


@dataclass(frozen=True)
class Response:
    """
    Result of a single transfer.

    Attributes:
        url: URL of the request (echoed back)
        status_code: HTTP status, or a ClientStatus sentinel on failure
        error: True when status_code is a client-error sentinel
        error_string: Diagnostic text, empty unless the transfer failed
        text: Decoded response body, empty on failure
        content: Raw response body, empty on failure

    Note:
        4xx/5xx are ordinary responses (error=False). Inspect status_code.
    """

    url: str
    status_code: int
    error: bool = False
    error_string: str = ""
    text: str = ""
    content: bytes = b""


def make_response(
    url: str,
    status_code: int,
    error_string: str = "",
    text: str = "",
    content: bytes = b""
) -> Response:
    """Build a Response, deriving the error flag from status_code."""
    return Response(
        url=url,
        status_code=int(status_code),
        error=is_client_error(status_code),
        error_string=error_string,
        text=text,
        content=content,
    )
