# src/http_request/core/engine.py
"""
Transfer engine bootstrap and handle factory.

The engine is requests (on top of urllib3). A handle is one
requests.Session. Process-wide setup runs once, on the first transfer,
no matter how many threads reach it at the same time.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import requests
import urllib3
from requests.adapters import HTTPAdapter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineInfo:
    """
    Snapshot of the engine taken during bootstrap.

    Attributes:
        requests_version: Installed requests version
        urllib3_version: Installed urllib3 version
        ca_bundle: Default CA bundle used for TLS verification
        user_agent: User-Agent sent when a request does not set one
    """
    requests_version: str
    urllib3_version: str
    ca_bundle: str
    user_agent: str


_init_lock = threading.Lock()
_engine_info: Optional[EngineInfo] = None


def _bootstrap() -> EngineInfo:
    """One-time global setup. Called with _init_lock held."""
    # Lazy import to avoid circular dependency
    from .. import __version__

    info = EngineInfo(
        requests_version=requests.__version__,
        urllib3_version=urllib3.__version__,
        ca_bundle=requests.utils.DEFAULT_CA_BUNDLE_PATH,
        user_agent=f"http-request-core/{__version__} {requests.utils.default_user_agent()}",
    )
    logger.debug(
        "Transfer engine initialized: requests=%s urllib3=%s ca_bundle=%s",
        info.requests_version,
        info.urllib3_version,
        info.ca_bundle,
    )
    return info


def ensure_initialized() -> EngineInfo:
    """
    Initialize the engine if that has not happened yet.

    Idempotent and thread-safe: the bootstrap runs exactly once even when
    several threads call this concurrently before it completes.

    Returns:
        EngineInfo of the initialized engine
    """
    global _engine_info

    info = _engine_info
    if info is not None:
        return info

    with _init_lock:
        if _engine_info is None:
            _engine_info = _bootstrap()
        return _engine_info


def is_initialized() -> bool:
    return _engine_info is not None


def engine_info() -> Optional[EngineInfo]:
    """EngineInfo, or None before the first transfer."""
    return _engine_info


def reset_engine() -> None:
    """Forget the bootstrap so the next transfer runs it again (tests)."""
    global _engine_info
    with _init_lock:
        _engine_info = None


def create_handle(max_redirects: int = 30) -> requests.Session:
    """
    Create a transfer handle.

    Args:
        max_redirects: Redirect limit for this handle

    Returns:
        requests.Session owned by the caller, who must close() it
    """
    session = requests.Session()

    # No retry policy at this layer
    adapter = HTTPAdapter(max_retries=0)
    session.mount('http://', adapter)
    session.mount('https://', adapter)

    session.max_redirects = max_redirects
    return session
